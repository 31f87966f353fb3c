"""
Centralized error handling for the job board.

Defines the error taxonomy shared by the data-access layer and the web
front end, plus a decorator that gives every store-backed operation the
same logging and fault-wrapping behavior.
"""

from functools import wraps
from typing import Any, Awaitable, Callable, Type, TypeVar

from pymongo.errors import PyMongoError

from .logger import get_logger

# Type variable for generic return types
T = TypeVar("T")


class JobBoardError(Exception):
    """Base class for all job board errors."""

    default_message = "Job board operation failed."

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class ConfigurationError(JobBoardError, ValueError):
    """Required configuration is missing. Fatal at startup."""

    default_message = "Job board is not configured."


class JobSearchError(JobBoardError):
    """The jobs collection could not be queried."""

    default_message = "Failed to search jobs."


class JobFetchError(JobBoardError):
    """A single job could not be loaded."""

    default_message = "Failed to fetch job details."


class JobPostError(JobBoardError):
    """A new job could not be stored."""

    default_message = "Failed to post job."


class JobInsertError(JobPostError):
    """
    The store accepted an insert but returned no identifier.

    Treated as an invariant violation: surfaced to the caller, never retried.
    """

    default_message = "Job insertion failed, no ID returned."


def board_operation(
    operation_name: str,
    error_type: Type[JobBoardError],
    log_success: bool = True,
):
    """
    Decorator for async store-backed operations with consistent error handling.

    Provides:
    - INFO logging on success (if log_success=True)
    - ERROR logging with stack trace when the store faults
    - Conversion of any PyMongoError into ``error_type`` carrying the
      operation's generic message, with the original error chained

    JobBoardError subclasses raised inside the operation propagate unchanged.

    Args:
        operation_name: Human-readable operation name (e.g., "job search")
        error_type: JobBoardError subclass raised on store faults
        log_success: If True, logs successful completion at INFO level

    Usage:
        @board_operation("job search", JobSearchError)
        async def search_jobs(self, criteria):
            ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        log = get_logger(func.__module__, operation=operation_name)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                result = await func(*args, **kwargs)
            except JobBoardError:
                raise
            except PyMongoError as e:
                log.error(f"Failed: {e}", exc_info=True)
                raise error_type() from e
            if log_success:
                log.info("Completed successfully")
            return result

        return wrapper

    return decorator
