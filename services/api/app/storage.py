from typing import Dict, List, Optional
from nanoid import generate
from app.models import Application, Company, Customization, Job

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

def new_id() -> str:
    return generate(size=12, alphabet=ALPHABET)

class MemoryStore:
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.companies: Dict[str, Company] = {}
        self.customizations: Dict[str, Customization] = {}  # company_id -> customization
        self.jobs: Dict[str, Job] = {}
        self.applications: Dict[str, Application] = {}

    def add_company(self, company: Company) -> None:
        self.companies[company.id] = company

    def get_company(self, company_id: str) -> Optional[Company]:
        return self.companies.get(company_id)

    def get_company_by_slug(self, slug: str) -> Optional[Company]:
        for company in self.companies.values():
            if company.slug == slug:
                return company
        return None

    def get_customization(self, company_id: str) -> Optional[Customization]:
        return self.customizations.get(company_id)

    def save_customization(self, customization: Customization) -> None:
        self.customizations[customization.company_id] = customization

    def add_job(self, job: Job) -> None:
        self.jobs[job.id] = job

    def get_job(self, job_id: str) -> Optional[Job]:
        return self.jobs.get(job_id)

    def update_job(self, job: Job) -> None:
        self.jobs[job.id] = job

    def delete_job(self, job_id: str) -> bool:
        return self.jobs.pop(job_id, None) is not None

    def list_jobs(self, company_id: str) -> List[Job]:
        jobs = [j for j in self.jobs.values() if j.company_id == company_id]
        return sorted(jobs, key=lambda j: j.order_index)

    def add_application(self, application: Application) -> None:
        self.applications[application.id] = application

    def list_applications(self, company_id: str) -> List[Application]:
        apps = [a for a in self.applications.values() if a.company_id == company_id]
        return sorted(apps, key=lambda a: a.created_at, reverse=True)

memory_store = MemoryStore()
