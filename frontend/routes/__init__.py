"""
Front-end route modules.

Each module handles a specific area of functionality.
"""

from .api import router as api_router
from .auth import router as auth_router
from .employer import router as employer_router
from .jobs import router as jobs_router

__all__ = [
    "api_router",
    "auth_router",
    "employer_router",
    "jobs_router",
]
