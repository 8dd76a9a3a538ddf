import logging
from fastapi import APIRouter, BackgroundTasks, HTTPException
from datetime import datetime, timezone

from app.mailer import send_application_confirmation_email
from app.models import Application, CreateApplicationRequest
from app.storage import memory_store, new_id

router = APIRouter()

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("job_id", "company_id", "first_name", "last_name", "email", "mobile_number")

async def notify_candidate(email: str, name: str, job_title: str, company_name: str) -> None:
    # The application is already stored; a failed email must not surface to the candidate.
    try:
        await send_application_confirmation_email(email, name, job_title, company_name)
    except Exception:
        logger.exception("Failed to send confirmation email to=%s", email)

@router.post("/applications", status_code=201)
def submit_application(payload: CreateApplicationRequest, background_tasks: BackgroundTasks):
    if any(not getattr(payload, f) for f in REQUIRED_FIELDS):
        raise HTTPException(status_code=400, detail="Missing required fields")

    job = memory_store.get_job(payload.job_id)
    company = memory_store.get_company(payload.company_id)
    if not job or not company or job.company_id != company.id:
        raise HTTPException(status_code=404, detail="Job not found.")

    application = Application(
        id=new_id(),
        created_at=datetime.now(timezone.utc),
        **payload.model_dump(),
    )
    memory_store.add_application(application)
    logger.info("Application %s received for job=%s company=%s", application.id, job.id, company.id)

    background_tasks.add_task(
        notify_candidate,
        application.email,
        f"{application.first_name} {application.last_name}",
        job.title,
        company.name,
    )
    return {"success": True, "data": application}
