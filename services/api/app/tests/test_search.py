from app.models import Job
from app.search import filter_jobs, job_facets

def make_job(i, **kw):
    fields = dict(id=str(i), company_id="c1", title="Engineer", department="Engineering",
                  location="Berlin", order_index=i)
    fields.update(kw)
    return Job(**fields)

JOBS = [
    make_job(0, title="Backend Engineer"),
    make_job(1, title="Designer", department="Design", location="Lisbon", work_policy="Hybrid"),
    make_job(2, title="Sales Lead", department="Sales", location="Remote EU",
             job_type="Contract", experience_level="Senior"),
]

def test_no_filters_returns_everything():
    assert filter_jobs(JOBS) == JOBS

def test_query_matches_title_department_location_case_insensitive():
    assert [j.id for j in filter_jobs(JOBS, query="ENGINEER")] == ["0"]
    assert [j.id for j in filter_jobs(JOBS, query="design")] == ["1"]
    assert [j.id for j in filter_jobs(JOBS, query="lisbon")] == ["1"]

def test_exact_filters_combine():
    assert [j.id for j in filter_jobs(JOBS, work_policy="Remote")] == ["0", "2"]
    assert [j.id for j in filter_jobs(JOBS, work_policy="Remote", job_type="Contract")] == ["2"]
    assert filter_jobs(JOBS, location="Remote") == []

def test_facets_are_sorted_and_distinct():
    facets = job_facets(JOBS)
    assert facets.locations == ["Berlin", "Lisbon", "Remote EU"]
    assert facets.job_types == ["Contract", "Full-time"]
    assert facets.experience_levels == ["Mid", "Senior"]
    assert facets.work_policies == ["Hybrid", "Remote"]
    assert facets.departments == ["Design", "Engineering", "Sales"]
