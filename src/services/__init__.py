"""
Services module for job board operations.

JobBoardService wraps the jobs collection; ApplicantTracker and
ApplicationHistory are in-memory placeholders for applicant tracking.
"""

from src.services.applicant_tracking_service import (
    ApplicantNotFoundError,
    ApplicantTracker,
    ApplicationHistory,
)
from src.services.job_board_service import JobBoardService, job_to_json, serialize_job

__all__ = [
    "ApplicantNotFoundError",
    "ApplicantTracker",
    "ApplicationHistory",
    "JobBoardService",
    "job_to_json",
    "serialize_job",
]
