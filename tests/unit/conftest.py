"""
Global fixtures for all unit tests.

Keeps store configuration out of the real environment so no test can
reach a live MongoDB by accident.
"""

import pytest


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Remove real store settings; tests set what they need explicitly."""
    for name in ("MONGODB_URI", "MONGODB_DB_NAME", "MONGODB_JOBS_COLLECTION"):
        monkeypatch.delenv(name, raising=False)
