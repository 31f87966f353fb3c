"""
Job Board Service

Search, fetch and post operations over the jobs collection.

Each operation is a single awaited store call. Store faults surface as the
operation's generic JobBoardError subclass; no retries are attempted here.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from src.common.error_handling import (
    JobFetchError,
    JobInsertError,
    JobPostError,
    JobSearchError,
    board_operation,
)
from src.common.job_query import RECENCY_SORT, JobQueryBuilder, SearchCriteria
from src.common.logger import get_logger
from src.common.object_ids import to_external_id, to_internal_id
from src.common.repositories.base import JobRepositoryInterface
from src.common.types import Job, JobCreate

search_log = get_logger(__name__, operation="job search")
fetch_log = get_logger(__name__, operation="job fetch")
post_log = get_logger(__name__, operation="job post")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def serialize_job(job: Dict[str, Any]) -> Dict[str, Any]:
    """
    Serialize a MongoDB job document for the boundary.

    Replaces ``_id`` with its string form under ``id``; other fields pass
    through unchanged.
    """
    result = {key: value for key, value in job.items() if key != "_id"}
    if "_id" in job:
        result["id"] = to_external_id(job["_id"])
    return result


def job_to_json(job: Job) -> Dict[str, Any]:
    """JSON-ready dict with the stored field names and an ISO datePosted."""
    return job.model_dump(mode="json", by_alias=True)


class JobBoardService:
    """
    Job operations backed by a JobRepositoryInterface.

    Usage:
        service = JobBoardService(get_job_repository(db_client))
        jobs = await service.search_jobs(SearchCriteria.from_params(keyword="python"))
    """

    def __init__(
        self,
        repository: JobRepositoryInterface,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._clock = clock

    @board_operation("job search", JobSearchError, log_success=False)
    async def search_jobs(
        self,
        criteria: Optional[SearchCriteria] = None,
        limit: int = 0,
    ) -> List[Job]:
        """
        Find jobs matching every supplied criterion, most recent first.

        Args:
            criteria: Optional search parameters; None or empty matches all
            limit: Maximum jobs to return (0 = no limit)

        Returns:
            Matching jobs ordered by datePosted descending

        Raises:
            JobSearchError: If the store query fails
        """
        criteria = criteria or SearchCriteria()
        query = JobQueryBuilder.from_criteria(criteria).build()
        search_log.info(
            f"Criteria: keyword={criteria.keyword!r} location={criteria.location!r} "
            f"jobType={criteria.job_type!r} experienceLevel={criteria.experience_level!r}"
        )

        docs = await self._repository.find(query, sort=RECENCY_SORT, limit=limit)
        return [Job.model_validate(serialize_job(doc)) for doc in docs]

    @board_operation("job fetch", JobFetchError, log_success=False)
    async def get_job(self, job_id: str) -> Optional[Job]:
        """
        Fetch one job by its external id.

        Malformed ids and missing jobs both return None; malformed ids are
        logged so the two cases can be told apart.

        Raises:
            JobFetchError: If the store lookup fails
        """
        parsed = to_internal_id(job_id)
        if parsed.malformed:
            fetch_log.warning(f"Invalid Job ID format: {job_id!r}")
            return None

        doc = await self._repository.find_one({"_id": parsed.value})
        if doc is None:
            fetch_log.info(f"Job not found: {job_id}")
            return None
        return Job.model_validate(serialize_job(doc))

    @board_operation("job post", JobPostError)
    async def post_job(self, job_data: JobCreate) -> str:
        """
        Store a new job with a server-assigned posting date.

        Returns:
            The new job's id in string form

        Raises:
            JobInsertError: If the store returned no id
            JobPostError: If the insert fails
        """
        document = job_data.to_document()
        document["datePosted"] = self._clock()

        result = await self._repository.insert_one(document)
        if not result.inserted_id:
            raise JobInsertError()

        post_log.info(f"Job posted with ID: {result.inserted_id}")
        return result.inserted_id
