"""
Repository Pattern for MongoDB Operations

Provides an abstraction layer over the jobs collection.

Public API:
- get_job_repository(db_client): Build the job repository for a DatabaseClient
- JobRepositoryInterface: Abstract interface for the jobs collection
- RepositoryConfig: Store settings loaded from the environment
- WriteResult: Result dataclass for write operations

Usage:
    from src.common.database import DatabaseClient
    from src.common.repositories import RepositoryConfig, get_job_repository

    db_client = DatabaseClient.from_config(RepositoryConfig.from_env())
    job_repo = get_job_repository(db_client)
    doc = await job_repo.find_one({"_id": ObjectId(job_id)})
"""

from .base import JobRepositoryInterface, WriteResult
from .config import JOBS_COLLECTION, RepositoryConfig, get_job_repository

__all__ = [
    "get_job_repository",
    "JobRepositoryInterface",
    "RepositoryConfig",
    "WriteResult",
    "JOBS_COLLECTION",
]
