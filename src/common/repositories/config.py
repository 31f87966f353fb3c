"""
Repository Configuration and Factory

Loads store settings from the environment and builds the job repository
for a given DatabaseClient.
"""

import os
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..error_handling import ConfigurationError
from .base import JobRepositoryInterface

if TYPE_CHECKING:
    from ..database import DatabaseClient

logger = logging.getLogger(__name__)

JOBS_COLLECTION = "jobs"


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from environment variables.
    """
    mongodb_uri: str
    database: str
    collection: str = JOBS_COLLECTION

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - MONGODB_URI (required): MongoDB connection string
        - MONGODB_DB_NAME (required): Database name
        - MONGODB_JOBS_COLLECTION: Jobs collection name (default: jobs)

        Returns:
            RepositoryConfig instance

        Raises:
            ConfigurationError: If MONGODB_URI or MONGODB_DB_NAME is not set
        """
        mongodb_uri = os.getenv("MONGODB_URI")
        if not mongodb_uri:
            raise ConfigurationError("MONGODB_URI environment variable is required")

        database = os.getenv("MONGODB_DB_NAME")
        if not database:
            raise ConfigurationError("MONGODB_DB_NAME environment variable is required")

        collection = os.getenv("MONGODB_JOBS_COLLECTION") or JOBS_COLLECTION
        logger.debug(f"Repository config: database={database} collection={collection}")
        return cls(mongodb_uri=mongodb_uri, database=database, collection=collection)


def get_job_repository(
    db_client: "DatabaseClient",
    collection: str = JOBS_COLLECTION,
) -> JobRepositoryInterface:
    """
    Build the job repository on top of an existing DatabaseClient.

    The repository holds no connection of its own; all repositories built
    from the same client share its connection pool.
    """
    from .mongo_repository import MongoJobRepository

    return MongoJobRepository(db_client, collection=collection)
