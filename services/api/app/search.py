"""Job board filtering for the public careers page."""

from app.models import Job, JobFacets


def filter_jobs(
    jobs: list[Job],
    query: str = "",
    location: str = "",
    job_type: str = "",
    experience_level: str = "",
    work_policy: str = "",
    department: str = "",
) -> list[Job]:
    """Apply the careers page search box and dropdown filters.

    The free-text query matches case-insensitively against title, department
    and location. Every other filter is an exact match and is ignored when
    empty.
    """
    q = query.lower()
    exact = {
        "location": location,
        "job_type": job_type,
        "experience_level": experience_level,
        "work_policy": work_policy,
        "department": department,
    }

    out = []
    for job in jobs:
        if q and not any(q in value.lower() for value in (job.title, job.department, job.location)):
            continue
        if any(wanted and getattr(job, field) != wanted for field, wanted in exact.items()):
            continue
        out.append(job)
    return out


def _distinct(jobs: list[Job], field: str) -> list[str]:
    return sorted({getattr(j, field) for j in jobs})


def job_facets(jobs: list[Job]) -> JobFacets:
    """Collect the dropdown options offered for a set of jobs."""
    return JobFacets(
        locations=_distinct(jobs, "location"),
        job_types=_distinct(jobs, "job_type"),
        experience_levels=_distinct(jobs, "experience_level"),
        work_policies=_distinct(jobs, "work_policy"),
        departments=_distinct(jobs, "department"),
    )
