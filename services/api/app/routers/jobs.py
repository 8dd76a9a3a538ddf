from fastapi import APIRouter, HTTPException, Response

from app.models import CreateJobRequest, Job, UpdateJobRequest
from app.routers.companies import get_company_or_404
from app.storage import memory_store, new_id

router = APIRouter()

NON_NULLABLE = {
    "title", "department", "location", "job_type",
    "employment_type", "experience_level", "work_policy", "order_index",
}

def get_job_or_404(job_id: str) -> Job:
    job = memory_store.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found.")
    return job

@router.post("/companies/{company_id}/jobs", status_code=201)
def create_job(company_id: str, payload: CreateJobRequest) -> Job:
    get_company_or_404(company_id)
    job = Job(
        id=new_id(),
        company_id=company_id,
        order_index=len(memory_store.list_jobs(company_id)),
        **payload.model_dump(),
    )
    memory_store.add_job(job)
    return job

@router.get("/companies/{company_id}/jobs")
def list_jobs(company_id: str) -> list[Job]:
    get_company_or_404(company_id)
    return memory_store.list_jobs(company_id)

@router.patch("/jobs/{job_id}")
def update_job(job_id: str, payload: UpdateJobRequest) -> Job:
    job = get_job_or_404(job_id)
    changes = payload.model_dump(exclude_unset=True)
    # null only clears optional fields
    changes = {k: v for k, v in changes.items() if v is not None or k not in NON_NULLABLE}
    updated = job.model_copy(update=changes)
    memory_store.update_job(updated)
    return updated

@router.delete("/jobs/{job_id}", status_code=204)
def delete_job(job_id: str) -> Response:
    if not memory_store.delete_job(job_id):
        raise HTTPException(status_code=404, detail="Job not found.")
    return Response(status_code=204)
