"""
Form models for the server-rendered pages.

Validation happens here, not in the data-access layer. Each model maps
pydantic errors onto the user-facing messages shown next to the fields.
"""

from typing import Any, ClassVar, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.common.types import ExperienceLevel, JobCreate, JobType

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class FormModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    # Field alias -> message shown when that field fails validation
    messages: ClassVar[Dict[str, str]] = {}

    @classmethod
    def parse_form(cls, data: Mapping[str, Any]):
        """
        Validate submitted form data.

        Returns:
            (model, {}) on success, (None, {field: message}) on failure
        """
        try:
            return cls.model_validate(dict(data)), {}
        except ValidationError as e:
            return None, form_errors(e, cls.messages)


def form_errors(exc: ValidationError, messages: Dict[str, str]) -> Dict[str, str]:
    """First error message per field, preferring the form's own wording."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__all__"
        errors.setdefault(field, messages.get(field, error["msg"]))
    return errors


class JobPostForm(FormModel):
    messages: ClassVar[Dict[str, str]] = {
        "title": "Job title must be at least 3 characters long.",
        "company": "Company name must be at least 2 characters long.",
        "location": "Location must be at least 2 characters long.",
        "salary": "Salary information is required.",
        "description": "Description must be at least 50 characters long.",
        "jobType": "Job type is required.",
        "experienceLevel": "Experience level is required.",
    }

    title: str = Field(min_length=3)
    company: str = Field(min_length=2)
    location: str = Field(min_length=2)
    salary: str = Field(min_length=3)
    description: str = Field(min_length=50)
    job_type: JobType = Field(alias="jobType")
    experience_level: ExperienceLevel = Field(alias="experienceLevel")

    def to_job_create(self) -> JobCreate:
        return JobCreate(
            title=self.title,
            company=self.company,
            location=self.location,
            salary=self.salary,
            description=self.description,
            job_type=self.job_type,
            experience_level=self.experience_level,
        )


class LoginForm(FormModel):
    messages: ClassVar[Dict[str, str]] = {
        "email": "Please enter a valid email address.",
        "password": "Password must be at least 6 characters long.",
    }

    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)


class SignupForm(FormModel):
    messages: ClassVar[Dict[str, str]] = {
        "name": "Name must be at least 2 characters long.",
        "email": "Please enter a valid email address.",
        "password": "Password must be at least 6 characters long.",
        "role": "Please select your role.",
    }

    name: str = Field(min_length=2)
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)
    role: str = Field(pattern=r"^(seeker|employer)$")
