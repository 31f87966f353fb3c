"""
Applicant Tracking Service

In-memory, unpersisted tracking of an employer's postings and applicants
and of a seeker's applications. State lives for the life of the process
and is seeded with demo data; nothing here touches MongoDB.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from src.common.logger import get_logger

logger = get_logger(__name__, operation="applicant tracking")

APPLICANT_STATUSES = (
    "New",
    "Reviewed",
    "Interview Scheduled",
    "Rejected",
    "Hired",
)


class ApplicantNotFoundError(KeyError):
    """No applicant with the given id is tracked."""


@dataclass(frozen=True)
class PostedJob:
    id: str
    title: str
    applications_count: int
    status: str
    date_posted: datetime


@dataclass(frozen=True)
class Applicant:
    id: str
    job_id: str
    job_title: str
    name: str
    date_applied: datetime
    status: str


@dataclass(frozen=True)
class Application:
    id: str
    job_id: str
    job_title: str
    company: str
    date_applied: datetime
    status: str


@dataclass(frozen=True)
class DashboardSummary:
    total_postings: int
    open_postings: int
    total_applicants: int
    new_applicants: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ApplicantTracker:
    """
    Employer-side postings and applicants.

    Usage:
        tracker = ApplicantTracker()
        tracker.update_applicant_status("app1", "Reviewed")
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        now = clock()
        days = lambda n: now - timedelta(days=n)  # noqa: E731

        self._postings: List[PostedJob] = [
            PostedJob("job1", "Senior Frontend Engineer", 15, "Open", days(3)),
            PostedJob("job2", "Marketing Manager", 28, "Open", days(7)),
            PostedJob("job3", "Junior Backend Developer", 5, "Closed", days(30)),
        ]
        self._applicants: Dict[str, Applicant] = {
            a.id: a
            for a in (
                Applicant("app1", "job1", "Senior Frontend Engineer", "Alice Johnson", days(1), "New"),
                Applicant("app2", "job1", "Senior Frontend Engineer", "Bob Smith", days(2), "Reviewed"),
                Applicant("app3", "job2", "Marketing Manager", "Charlie Brown", days(3), "Interview Scheduled"),
                Applicant("app4", "job2", "Marketing Manager", "Diana Prince", days(4), "New"),
            )
        }

    def list_postings(self) -> List[PostedJob]:
        return list(self._postings)

    def list_applicants(self, job_id: Optional[str] = None) -> List[Applicant]:
        """Applicants, optionally for one posting, most recent first."""
        applicants = [
            a for a in self._applicants.values() if job_id is None or a.job_id == job_id
        ]
        return sorted(applicants, key=lambda a: a.date_applied, reverse=True)

    def update_applicant_status(self, applicant_id: str, status: str) -> Applicant:
        """
        Change an applicant's status.

        Raises:
            ValueError: If status is not one of APPLICANT_STATUSES
            ApplicantNotFoundError: If the applicant is unknown
        """
        if status not in APPLICANT_STATUSES:
            raise ValueError(
                f"Invalid applicant status '{status}'. Must be one of: {', '.join(APPLICANT_STATUSES)}"
            )
        current = self._applicants.get(applicant_id)
        if current is None:
            raise ApplicantNotFoundError(applicant_id)

        updated = replace(current, status=status)
        self._applicants[applicant_id] = updated
        logger.info(f"Applicant {applicant_id} status: {current.status} -> {status}")
        return updated

    def summary(self) -> DashboardSummary:
        return DashboardSummary(
            total_postings=len(self._postings),
            open_postings=sum(1 for p in self._postings if p.status == "Open"),
            total_applicants=len(self._applicants),
            new_applicants=sum(1 for a in self._applicants.values() if a.status == "New"),
        )


class ApplicationHistory:
    """A seeker's submitted applications (demo data)."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        now = clock()
        self._applications = [
            Application("app1", "1", "Software Engineer", "Tech Corp", now - timedelta(days=2), "Under Review"),
            Application("app2", "2", "Data Scientist", "Data Solutions", now - timedelta(days=5), "Interviewing"),
            Application("app3", "4", "Product Manager", "Innovate LLC", now - timedelta(days=10), "Applied"),
            Application("app4", "5", "UX Designer", "Creative Minds", now - timedelta(days=1), "Rejected"),
        ]

    def list_applications(self) -> List[Application]:
        """All applications, most recent first."""
        return sorted(self._applications, key=lambda a: a.date_applied, reverse=True)

    def apply(self, job_id: str, job_title: str, company: str) -> Application:
        """
        Record an application to a job.

        Applying twice to the same job returns the existing application.
        """
        for existing in self._applications:
            if existing.job_id == job_id:
                return existing

        application = Application(
            id=f"app{len(self._applications) + 1}",
            job_id=job_id,
            job_title=job_title,
            company=company,
            date_applied=self._clock(),
            status="Applied",
        )
        self._applications.append(application)
        logger.info(f"Application {application.id} submitted for job {job_id}")
        return application
