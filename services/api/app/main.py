"""Careers Page API: companies, job boards and candidate applications."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.routers import applications, careers, companies, jobs
from app.settings import settings

ROUTERS = (
    (companies.router, "companies"),
    (jobs.router, "jobs"),
    (careers.router, "careers"),
    (applications.router, "applications"),
)

app = FastAPI(title="Careers Page API", version="0.1.0")

# The dashboard and the public careers page both call the API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)

for router, tag in ROUTERS:
    app.include_router(router, prefix="/v1", tags=[tag])


@app.get("/health")
def health():
    """Liveness check, also reporting which environment is running."""
    return {"status": "ok", "env": settings.app_env}
