"""
Pytest fixtures for front-end route tests.

The app is built with create_app() and driven without entering its
lifespan, so no MongoDB connection is attempted. The job service is
swapped for one backed by the in-memory repository from tests/conftest.py.
"""

import os

# BoardSettings is read on first use; pin values before the app is imported.
os.environ["ENVIRONMENT"] = "development"
os.environ["RECENT_JOBS_LIMIT"] = "6"

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from frontend.app import create_app
from frontend.config import BoardSettings, get_settings
from frontend.dependencies import get_job_service

POSTED_AT = datetime(2024, 12, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    return BoardSettings(environment="development", recent_jobs_limit=6)


@pytest.fixture
def app(job_service, settings):
    """FastAPI app wired to the in-memory job service."""
    app = create_app()
    app.dependency_overrides[get_job_service] = lambda: job_service
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def client(app):
    """FastAPI test client (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def add_job(job_repo):
    """
    Store a job document directly and return its id.

    Each call is posted one hour before the previous one unless
    datePosted is given.
    """
    def _add(**fields):
        offset = timedelta(hours=len(job_repo.documents))
        doc = {
            "_id": ObjectId(),
            "title": "Software Engineer",
            "company": "Tech Corp",
            "location": "San Francisco, CA",
            "salary": "$120,000 - $150,000",
            "description": "Build reliable services for millions of users across the globe every day.",
            "jobType": "full-time",
            "experienceLevel": "mid",
            "datePosted": POSTED_AT - offset,
        }
        doc.update(fields)
        job_repo.documents.append(doc)
        return str(doc["_id"])

    return _add


@pytest.fixture
def valid_post_form():
    return {
        "title": "Platform Engineer",
        "company": "Acme",
        "location": "Remote",
        "salary": "$130k",
        "jobType": "full-time",
        "experienceLevel": "senior",
        "description": "Own the deployment platform and help product teams ship safely every day.",
    }
