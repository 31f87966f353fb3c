"""
Shared fixtures for job board tests.

Provides an in-memory job repository that evaluates the filter documents
produced by JobQueryBuilder, so service and route tests can check search
semantics without a MongoDB server.
"""

import copy
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId

from src.common.repositories.base import JobRepositoryInterface, WriteResult
from src.services.job_board_service import JobBoardService


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for key, condition in query.items():
        if key == "$and":
            if not all(_matches(doc, sub) for sub in condition):
                return False
        elif key == "$or":
            if not any(_matches(doc, sub) for sub in condition):
                return False
        elif isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            value = doc.get(key)
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif doc.get(key) != condition:
            return False
    return True


class InMemoryJobRepository(JobRepositoryInterface):
    """JobRepositoryInterface over a plain list of documents."""

    def __init__(self, documents: Optional[List[Dict[str, Any]]] = None):
        self.documents: List[Dict[str, Any]] = []
        self.queries: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None
        self.omit_inserted_id = False
        for doc in documents or []:
            self.documents.append({"_id": ObjectId(), **doc})

    def _raise_if_failing(self) -> None:
        if self.error is not None:
            raise self.error

    async def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._raise_if_failing()
        self.queries.append(filter)
        for doc in self.documents:
            if _matches(doc, filter):
                return copy.deepcopy(doc)
        return None

    async def find(
        self,
        filter: Dict[str, Any],
        projection: Optional[Dict[str, Any]] = None,
        sort: Optional[List[tuple]] = None,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        self._raise_if_failing()
        self.queries.append(filter)
        results = [copy.deepcopy(doc) for doc in self.documents if _matches(doc, filter)]
        for field, direction in reversed(sort or []):
            results.sort(key=lambda d: d.get(field) or datetime.min.replace(tzinfo=timezone.utc),
                         reverse=direction < 0)
        if limit > 0:
            results = results[:limit]
        return results

    async def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        self._raise_if_failing()
        stored = {"_id": ObjectId(), **copy.deepcopy(document)}
        self.documents.append(stored)
        inserted_id = None if self.omit_inserted_id else str(stored["_id"])
        return WriteResult(inserted_id=inserted_id)


class TickingClock:
    """Clock that advances one minute per call, so posting order is deterministic."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(minutes=1)
        return self.current


@pytest.fixture
def job_repo():
    return InMemoryJobRepository()


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def job_service(job_repo, clock):
    return JobBoardService(job_repo, clock=clock)


@pytest.fixture
def sample_job_data():
    return {
        "title": "Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "salary": "$100k",
        "description": "Build and operate the APIs behind our job matching platform at scale.",
    }
