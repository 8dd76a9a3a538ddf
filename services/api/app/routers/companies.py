from fastapi import APIRouter, HTTPException
from datetime import datetime, timezone

from app.models import (
    ApplicationView,
    Company,
    CreateCompanyRequest,
    Customization,
    UpdateCustomizationRequest,
)
from app.storage import memory_store, new_id
from app.utils import is_valid_slug, normalize_slug
from app.video import normalize_video_reference

router = APIRouter()

INVALID_VIDEO_MSG = "Please enter a valid YouTube URL, video ID, or iframe embed code"
NON_NULLABLE = ("primary_color", "secondary_color")

def get_company_or_404(company_id: str) -> Company:
    company = memory_store.get_company(company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found.")
    return company

@router.post("/companies", status_code=201)
def create_company(payload: CreateCompanyRequest) -> Company:
    slug = normalize_slug(payload.slug)
    if not is_valid_slug(slug):
        raise HTTPException(status_code=400, detail="Slug must contain letters or digits and no / ? # % characters.")
    if memory_store.get_company_by_slug(slug):
        raise HTTPException(status_code=409, detail=f"Slug '{slug}' is already taken.")

    company = Company(
        id=new_id(),
        name=payload.name,
        slug=slug,
        website=payload.website,
        description=payload.description,
        created_at=datetime.now(timezone.utc),
    )
    memory_store.add_company(company)
    # every company starts with default branding
    memory_store.save_customization(Customization(company_id=company.id))
    return company

@router.get("/companies/{company_id}")
def get_company(company_id: str) -> Company:
    return get_company_or_404(company_id)

@router.get("/companies/{company_id}/customization")
def get_customization(company_id: str) -> Customization:
    get_company_or_404(company_id)
    return memory_store.get_customization(company_id) or Customization(company_id=company_id)

@router.put("/companies/{company_id}/customization")
def update_customization(company_id: str, payload: UpdateCustomizationRequest) -> Customization:
    get_company_or_404(company_id)
    current = memory_store.get_customization(company_id) or Customization(company_id=company_id)

    changes = payload.model_dump(exclude_unset=True)
    # colors always have a value; null means "leave unchanged"
    for key in NON_NULLABLE:
        if changes.get(key, "") is None:
            del changes[key]
    video = changes.pop("culture_video", None)
    if "culture_video" in payload.model_fields_set:
        if not video or not video.strip():
            changes["culture_video_url"] = None
        else:
            embed_url = normalize_video_reference(video)
            if not embed_url:
                raise HTTPException(status_code=400, detail=INVALID_VIDEO_MSG)
            changes["culture_video_url"] = embed_url

    updated = current.model_copy(update=changes)
    memory_store.save_customization(updated)
    return updated

@router.get("/companies/{company_id}/applications")
def list_applications(company_id: str) -> list[ApplicationView]:
    get_company_or_404(company_id)
    out = []
    for application in memory_store.list_applications(company_id):
        job = memory_store.get_job(application.job_id)
        out.append(ApplicationView(**application.model_dump(), job_title=job.title if job else None))
    return out
