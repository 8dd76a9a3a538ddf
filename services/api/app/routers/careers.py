from fastapi import APIRouter, HTTPException

from app.models import CareersPage, PageMeta
from app.search import filter_jobs, job_facets
from app.settings import settings
from app.storage import memory_store

router = APIRouter()

@router.get("/careers/{slug}")
def get_careers_page(
    slug: str,
    q: str = "",
    location: str = "",
    job_type: str = "",
    experience_level: str = "",
    work_policy: str = "",
    department: str = "",
) -> CareersPage:
    company = memory_store.get_company_by_slug(slug)
    if not company:
        raise HTTPException(status_code=404, detail="Careers page not found.")

    jobs = memory_store.list_jobs(company.id)
    meta = PageMeta(
        title=f"{company.name} - Careers",
        description=company.description or f"Join {company.name}",
        url=f"{settings.public_base_url.rstrip('/')}/careers/{company.slug}",
    )
    return CareersPage(
        company=company,
        customization=memory_store.get_customization(company.id),
        jobs=filter_jobs(jobs, q, location, job_type, experience_level, work_policy, department),
        # facets always describe the full board, not the filtered view
        facets=job_facets(jobs),
        meta=meta,
    )
