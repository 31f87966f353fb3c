"""
MongoDB Job Repository

Wraps the jobs collection behind JobRepositoryInterface.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pymongo.asynchronous.collection import AsyncCollection

from .base import JobRepositoryInterface, WriteResult

if TYPE_CHECKING:
    from ..database import DatabaseClient

logger = logging.getLogger(__name__)


class MongoJobRepository(JobRepositoryInterface):
    """
    Repository over a single MongoDB collection.

    Connection Management:
    - Borrows the collection from the shared DatabaseClient
    - The client connects once and PyMongo pools connections internally

    Error Handling:
    - Fail-fast: All errors propagate to caller
    """

    def __init__(self, db_client: "DatabaseClient", collection: str = "jobs"):
        """
        Args:
            db_client: Application-wide DatabaseClient
            collection: Collection name (default: "jobs")
        """
        self._db_client = db_client
        self._collection_name = collection

    async def _get_collection(self) -> AsyncCollection:
        return await self._db_client.get_collection(self._collection_name)

    async def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Find a single job document."""
        collection = await self._get_collection()
        return await collection.find_one(filter)

    async def find(
        self,
        filter: Dict[str, Any],
        projection: Optional[Dict[str, Any]] = None,
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """Find multiple job documents."""
        collection = await self._get_collection()
        cursor = collection.find(filter, projection)

        if sort:
            cursor = cursor.sort(sort)
        if limit > 0:
            cursor = cursor.limit(limit)

        return await cursor.to_list()

    async def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """Insert a single document."""
        collection = await self._get_collection()
        result = await collection.insert_one(document)

        return WriteResult(
            inserted_id=str(result.inserted_id) if result.inserted_id else None,
        )
