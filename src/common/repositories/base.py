"""
Repository Interface Definitions

Defines the abstract interface for job repository operations so the
service layer can run against MongoDB or an in-memory double.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class WriteResult:
    """
    Result of an insert.

    Attributes:
        inserted_id: String form of the inserted document's id (if any)
    """
    inserted_id: Optional[str] = None


class JobRepositoryInterface(ABC):
    """
    Abstract interface for the jobs collection.

    All methods follow fail-fast semantics: store errors propagate to the
    caller unchanged.
    """

    @abstractmethod
    async def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find a single job document.

        Args:
            filter: MongoDB query filter (e.g., {"_id": ObjectId(...)})

        Returns:
            Document dict if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(
        self,
        filter: Dict[str, Any],
        projection: Optional[Dict[str, Any]] = None,
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple job documents.

        Args:
            filter: MongoDB query filter
            projection: Fields to include/exclude
            sort: Sort order as list of (field, direction) tuples
            limit: Maximum documents to return (0 = no limit)

        Returns:
            List of matching documents
        """
        pass

    @abstractmethod
    async def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """
        Insert a single document.

        Returns:
            WriteResult with inserted_id set to the new id, or None if the
            store reported none
        """
        pass
