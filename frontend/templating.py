"""
Jinja2 template setup shared by all page routes.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

from src.common.types import ExperienceLevel, JobType
from version import __version__ as APP_VERSION

TEMPLATES_DIR = Path(__file__).parent / "templates"

JOB_TYPE_LABELS = {
    JobType.FULL_TIME.value: "Full-time",
    JobType.PART_TIME.value: "Part-time",
    JobType.CONTRACT.value: "Contract",
    JobType.INTERNSHIP.value: "Internship",
}

EXPERIENCE_LEVEL_LABELS = {
    ExperienceLevel.ENTRY.value: "Entry Level",
    ExperienceLevel.MID.value: "Mid Level",
    ExperienceLevel.SENIOR.value: "Senior Level",
    ExperienceLevel.MANAGER.value: "Manager",
}


def format_date(value: Optional[datetime]) -> str:
    """e.g. "Jan 5, 2025"; empty for missing dates."""
    if not value:
        return ""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.globals.update(
    version=APP_VERSION,
    job_type_labels=JOB_TYPE_LABELS,
    experience_level_labels=EXPERIENCE_LEVEL_LABELS,
)
