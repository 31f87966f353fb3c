"""
Employer dashboard and seeker applications pages.

Backed by the in-memory applicant tracker; nothing here is persisted.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from src.services.applicant_tracking_service import (
    APPLICANT_STATUSES,
    ApplicantNotFoundError,
    ApplicantTracker,
    ApplicationHistory,
)

from ..dependencies import get_applicant_tracker, get_application_history
from ..templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employer"])


def _dashboard(request: Request, tracker: ApplicantTracker, error: str = "", status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "employer_dashboard.html",
        {
            "summary": tracker.summary(),
            "postings": tracker.list_postings(),
            "applicants": tracker.list_applicants(),
            "statuses": APPLICANT_STATUSES,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("/employer/dashboard", response_class=HTMLResponse)
async def employer_dashboard(
    request: Request,
    tracker: ApplicantTracker = Depends(get_applicant_tracker),
):
    return _dashboard(request, tracker)


@router.post("/employer/applicants/{applicant_id}/status", response_class=HTMLResponse)
async def update_applicant_status(
    request: Request,
    applicant_id: str,
    tracker: ApplicantTracker = Depends(get_applicant_tracker),
):
    form = await request.form()
    status = str(form.get("status", ""))
    try:
        tracker.update_applicant_status(applicant_id, status)
    except ApplicantNotFoundError:
        return templates.TemplateResponse(
            request, "not_found.html", {"message": "Applicant not found"}, status_code=404
        )
    except ValueError as e:
        logger.warning(f"Rejected status update for {applicant_id}: {e}")
        return _dashboard(request, tracker, error=str(e), status_code=400)
    return RedirectResponse(url="/employer/dashboard", status_code=303)


@router.get("/applications", response_class=HTMLResponse)
async def my_applications(
    request: Request,
    history: ApplicationHistory = Depends(get_application_history),
):
    return templates.TemplateResponse(
        request, "applications.html", {"applications": history.list_applications()}
    )
