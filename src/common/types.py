"""
Type definitions for job board records.

Documents are stored with camelCase keys (jobType, experienceLevel,
datePosted); the models below expose snake_case attributes and serialize
back to the stored names via aliases.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    MANAGER = "manager"


class JobCreate(BaseModel):
    """Job fields supplied by the poster (no id, no posting date)."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    title: str
    description: str
    company: str
    location: str
    salary: str
    job_type: Optional[JobType] = Field(default=None, alias="jobType")
    experience_level: Optional[ExperienceLevel] = Field(default=None, alias="experienceLevel")

    def to_document(self) -> dict:
        """Document body for insertion; unset optional enums are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Job(BaseModel):
    """
    A stored job as returned at the boundary.

    Read side is lenient: the store does not enforce enum values, field
    presence or field types, so stored scalars are passed through as text.
    A datePosted that is not a datetime (or ISO string) reads as missing.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = ""
    description: str = ""
    company: str = ""
    location: str = ""
    salary: str = ""
    job_type: Optional[str] = Field(default=None, alias="jobType")
    experience_level: Optional[str] = Field(default=None, alias="experienceLevel")
    date_posted: Optional[datetime] = Field(default=None, alias="datePosted")

    @field_validator("title", "description", "company", "location", "salary", mode="before")
    @classmethod
    def text_or_empty(cls, v: Any) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("job_type", "experience_level", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Optional[str]:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("date_posted", mode="before")
    @classmethod
    def datetime_or_none(cls, v: Any) -> Optional[datetime]:
        if v is None or isinstance(v, datetime):
            return v
        if isinstance(v, str):
            try:
                return datetime.fromisoformat(v)
            except ValueError:
                return None
        return None
