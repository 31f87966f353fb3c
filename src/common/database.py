"""
MongoDB connection management for the job board.

DatabaseClient is the application context for the store: it is built once
at startup from RepositoryConfig and handed to every consumer. The client
is opened lazily on first use and reused for the life of the process.
"""

import asyncio
import logging
from typing import Optional

from pymongo import AsyncMongoClient, DESCENDING
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from .error_handling import ConfigurationError
from .repositories.config import RepositoryConfig

logger = logging.getLogger(__name__)


class DatabaseClient:
    """
    Async MongoDB client for the job board.

    Connects at most once (double-checked under a lock) and provides
    access to named collections.
    """

    def __init__(self, mongodb_uri: str, database: str):
        """
        Args:
            mongodb_uri: MongoDB connection string
            database: Database name

        Raises:
            ConfigurationError: If either value is empty
        """
        if not mongodb_uri:
            raise ConfigurationError("MONGODB_URI is not configured")
        if not database:
            raise ConfigurationError("MONGODB_DB_NAME is not configured")

        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._client: Optional[AsyncMongoClient] = None
        self._db: Optional[AsyncDatabase] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: RepositoryConfig) -> "DatabaseClient":
        return cls(config.mongodb_uri, config.database)

    async def connect(self) -> AsyncDatabase:
        """
        Open the connection if it is not open yet.

        Returns:
            The configured database handle
        """
        if self._db is not None:
            return self._db

        async with self._lock:
            if self._db is None:
                client = AsyncMongoClient(self._mongodb_uri, tz_aware=True)
                self._client = client
                self._db = client[self._database_name]
                logger.info(f"Connected to MongoDB: {self._database_name}")
        return self._db

    async def get_collection(self, name: str) -> AsyncCollection:
        """Get a collection by name, connecting on first use."""
        db = await self.connect()
        return db[name]

    async def ensure_indexes(self, collection: str = "jobs") -> None:
        """
        Create the recency index used by job search ordering.

        Index failures are logged, not raised: search still works without it.
        """
        jobs = await self.get_collection(collection)
        try:
            await jobs.create_index([("datePosted", DESCENDING)], name="datePosted")
            logger.info("✓ Created index: datePosted")
        except Exception as e:
            logger.warning(f"Index datePosted may already exist: {e}")

    async def close(self) -> None:
        """Close the MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._db = None
            logger.info("Disconnected from MongoDB")
