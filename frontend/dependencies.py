"""
Request dependencies.

Everything long-lived hangs off ``app.state`` and is handed to route
handlers through these functions, so tests can swap any of them with
``app.dependency_overrides``.
"""

from fastapi import Request

from src.services.applicant_tracking_service import ApplicantTracker, ApplicationHistory
from src.services.job_board_service import JobBoardService


def get_job_service(request: Request) -> JobBoardService:
    """Job service bound to the application's DatabaseClient (set at startup)."""
    return request.app.state.job_service


def get_applicant_tracker(request: Request) -> ApplicantTracker:
    return request.app.state.applicant_tracker


def get_application_history(request: Request) -> ApplicationHistory:
    return request.app.state.application_history
