"""
Job Pages

Server-rendered job listing, search, detail and posting pages.

Endpoints:
    GET  /                   - Home page with the most recent jobs
    GET  /jobs               - Search results
    GET  /jobs/post          - Posting form
    POST /jobs/post          - Submit a new job
    GET  /jobs/{job_id}      - Job detail
    POST /jobs/{job_id}/apply - Apply to a job
"""

import logging
from typing import Optional, Type

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from src.common.job_query import SearchCriteria
from src.common.types import ExperienceLevel, JobType
from src.services.applicant_tracking_service import ApplicationHistory
from src.services.job_board_service import JobBoardService

from ..config import BoardSettings, get_settings
from ..dependencies import get_application_history, get_job_service
from ..forms import JobPostForm
from ..templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["jobs"])


def known_value(value: Optional[str], enum_type: Type) -> Optional[str]:
    """Return value if it names a member of enum_type, else None."""
    if value in {member.value for member in enum_type}:
        return value
    return None


def criteria_from_query(
    keyword: str = Query(""),
    location: str = Query(""),
    job_type: str = Query("", alias="jobType"),
    experience_level: str = Query("", alias="experienceLevel"),
) -> SearchCriteria:
    """Search criteria from query parameters; unknown enum values are dropped."""
    return SearchCriteria.from_params(
        keyword=keyword,
        location=location,
        job_type=known_value(job_type, JobType),
        experience_level=known_value(experience_level, ExperienceLevel),
    )


def _not_found(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(
        request, "not_found.html", {"message": "Job not found"}, status_code=404
    )


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    service: JobBoardService = Depends(get_job_service),
    settings: BoardSettings = Depends(get_settings),
):
    jobs = await service.search_jobs(limit=settings.recent_jobs_limit)
    return templates.TemplateResponse(request, "index.html", {"jobs": jobs})


@router.get("/jobs", response_class=HTMLResponse)
async def list_jobs(
    request: Request,
    criteria: SearchCriteria = Depends(criteria_from_query),
    service: JobBoardService = Depends(get_job_service),
):
    jobs = await service.search_jobs(criteria)
    return templates.TemplateResponse(
        request, "jobs.html", {"jobs": jobs, "criteria": criteria}
    )


@router.get("/jobs/post", response_class=HTMLResponse)
async def post_job_form(request: Request):
    return templates.TemplateResponse(
        request, "post_job.html", {"form": {}, "errors": {}}
    )


@router.post("/jobs/post", response_class=HTMLResponse)
async def post_job(
    request: Request,
    service: JobBoardService = Depends(get_job_service),
):
    data = dict(await request.form())
    form, errors = JobPostForm.parse_form(data)
    if errors:
        logger.info(f"Job post rejected: invalid {', '.join(sorted(errors))}")
        return templates.TemplateResponse(
            request, "post_job.html", {"form": data, "errors": errors}, status_code=422
        )

    job_id = await service.post_job(form.to_job_create())
    return RedirectResponse(url=f"/jobs/{job_id}", status_code=303)


@router.get("/jobs/{job_id}", response_class=HTMLResponse)
async def job_detail(
    request: Request,
    job_id: str,
    service: JobBoardService = Depends(get_job_service),
):
    job = await service.get_job(job_id)
    if job is None:
        return _not_found(request)
    return templates.TemplateResponse(request, "job_detail.html", {"job": job})


@router.post("/jobs/{job_id}/apply")
async def apply_to_job(
    request: Request,
    job_id: str,
    service: JobBoardService = Depends(get_job_service),
    history: ApplicationHistory = Depends(get_application_history),
):
    job = await service.get_job(job_id)
    if job is None:
        return _not_found(request)

    history.apply(job.id, job.title, job.company)
    return RedirectResponse(url="/applications", status_code=303)
