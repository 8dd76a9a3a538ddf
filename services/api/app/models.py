from datetime import datetime
from pydantic import BaseModel, Field
from typing import Any, Literal

JobType = Literal["Full-time", "Part-time", "Contract"]
ExperienceLevel = Literal["Entry", "Mid", "Senior"]
WorkPolicy = Literal["Remote", "Hybrid", "On-site"]

class CreateCompanyRequest(BaseModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, description="Public careers page path segment")
    website: str | None = None
    description: str | None = None

class Company(BaseModel):
    id: str
    name: str
    slug: str
    website: str | None = None
    description: str | None = None
    created_at: datetime

class Customization(BaseModel):
    company_id: str
    primary_color: str = "#000000"
    secondary_color: str = "#ffffff"
    banner_image_url: str | None = None
    logo_url: str | None = None
    culture_video_url: str | None = None
    about_text: str | None = None

class UpdateCustomizationRequest(BaseModel):
    primary_color: str | None = None
    secondary_color: str | None = None
    banner_image_url: str | None = None
    logo_url: str | None = None
    culture_video: str | None = Field(None, description="YouTube URL, video id or iframe embed code")
    about_text: str | None = None

class JobFields(BaseModel):
    job_type: JobType = "Full-time"
    employment_type: str = "Permanent"
    experience_level: ExperienceLevel = "Mid"
    work_policy: WorkPolicy = "Remote"
    salary_min: int | None = None
    salary_max: int | None = None
    currency: str | None = None
    description: str | None = None
    requirements: str | None = None
    benefits: str | None = None
    responsibilities: str | None = None

class CreateJobRequest(JobFields):
    title: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)

class UpdateJobRequest(BaseModel):
    title: str | None = Field(None, min_length=1)
    department: str | None = Field(None, min_length=1)
    location: str | None = Field(None, min_length=1)
    job_type: JobType | None = None
    employment_type: str | None = None
    experience_level: ExperienceLevel | None = None
    work_policy: WorkPolicy | None = None
    salary_min: int | None = None
    salary_max: int | None = None
    currency: str | None = None
    description: str | None = None
    requirements: str | None = None
    benefits: str | None = None
    responsibilities: str | None = None
    order_index: int | None = None

class Job(JobFields):
    id: str
    company_id: str
    title: str
    department: str
    location: str
    order_index: int

class CreateApplicationRequest(BaseModel):
    # Required fields are checked by the router so it can answer 400
    job_id: str | None = None
    company_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    mobile_number: str | None = None
    resume_link: str | None = None
    linkedin_link: str | None = None
    github_link: str | None = None
    joining_days: int | None = None
    custom_answers: dict[str, Any] | None = None

class Application(BaseModel):
    id: str
    job_id: str
    company_id: str
    first_name: str
    last_name: str
    email: str
    mobile_number: str
    resume_link: str | None = None
    linkedin_link: str | None = None
    github_link: str | None = None
    joining_days: int | None = None
    custom_answers: dict[str, Any] | None = None
    created_at: datetime

class ApplicationView(Application):
    job_title: str | None = None

class JobFacets(BaseModel):
    locations: list[str]
    job_types: list[str]
    experience_levels: list[str]
    work_policies: list[str]
    departments: list[str]

class PageMeta(BaseModel):
    title: str
    description: str
    url: str

class CareersPage(BaseModel):
    company: Company
    customization: Customization | None = None
    jobs: list[Job]
    facets: JobFacets
    meta: PageMeta
