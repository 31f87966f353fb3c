"""
Job search filter construction.

Search parameters become typed clauses which are combined conjunctively
into a single MongoDB filter document. Absent parameters contribute no
clause, so an empty criteria set yields the match-all filter ``{}``.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pymongo import DESCENDING

from .types import ExperienceLevel, JobType

# Fields searched by the free-text keyword
KEYWORD_FIELDS: Tuple[str, ...] = ("title", "company", "description")

# Most recent postings first
RECENCY_SORT: List[Tuple[str, int]] = [("datePosted", DESCENDING)]


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class SearchCriteria:
    """Optional job search parameters. Empty strings mean "no constraint"."""

    keyword: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    experience_level: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        keyword: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
        experience_level: Optional[str] = None,
    ) -> "SearchCriteria":
        """Normalize raw request values: strip whitespace, drop empties."""
        return cls(
            keyword=_clean(keyword),
            location=_clean(location),
            job_type=_clean(_enum_value(job_type)),
            experience_level=_clean(_enum_value(experience_level)),
        )

    @property
    def is_empty(self) -> bool:
        return not any((self.keyword, self.location, self.job_type, self.experience_level))


def _enum_value(value: Any) -> Optional[str]:
    if isinstance(value, (JobType, ExperienceLevel)):
        return value.value
    return value


@dataclass(frozen=True)
class SubstringClause:
    """Case-insensitive literal substring match against any of ``fields``."""

    fields: Sequence[str]
    term: str

    def to_filter(self) -> Dict[str, Any]:
        pattern = {"$regex": re.escape(self.term), "$options": "i"}
        if len(self.fields) == 1:
            return {self.fields[0]: pattern}
        return {"$or": [{name: dict(pattern)} for name in self.fields]}


@dataclass(frozen=True)
class EqualsClause:
    """Exact match of ``field`` against ``value``."""

    field: str
    value: Any

    def to_filter(self) -> Dict[str, Any]:
        return {self.field: self.value}


@dataclass
class JobQueryBuilder:
    """
    Accumulates filter clauses and combines them conjunctively.

    Usage:
        query = JobQueryBuilder.from_criteria(criteria).build()
        cursor = collection.find(query).sort(RECENCY_SORT)
    """

    clauses: List[Any] = field(default_factory=list)

    def keyword(self, term: Optional[str]) -> "JobQueryBuilder":
        if term:
            self.clauses.append(SubstringClause(KEYWORD_FIELDS, term))
        return self

    def location(self, term: Optional[str]) -> "JobQueryBuilder":
        if term:
            self.clauses.append(SubstringClause(("location",), term))
        return self

    def job_type(self, value: Optional[str]) -> "JobQueryBuilder":
        if value:
            self.clauses.append(EqualsClause("jobType", value))
        return self

    def experience_level(self, value: Optional[str]) -> "JobQueryBuilder":
        if value:
            self.clauses.append(EqualsClause("experienceLevel", value))
        return self

    @classmethod
    def from_criteria(cls, criteria: SearchCriteria) -> "JobQueryBuilder":
        return (
            cls()
            .keyword(criteria.keyword)
            .location(criteria.location)
            .job_type(criteria.job_type)
            .experience_level(criteria.experience_level)
        )

    def build(self) -> Dict[str, Any]:
        """
        Combine clauses into one filter document.

        Returns:
            {} for no clauses, the single clause's filter for one clause,
            otherwise {"$and": [...]} in the order the clauses were added.
        """
        filters = [clause.to_filter() for clause in self.clauses]
        if not filters:
            return {}
        if len(filters) == 1:
            return filters[0]
        return {"$and": filters}
