"""
FastAPI application for the job board.

Serves server-rendered pages (Jinja2 + Tailwind CSS via CDN) and a small
JSON API over the job board service.

Startup loads .env, configures logging, and builds the DatabaseClient
context from MONGODB_URI / MONGODB_DB_NAME. A missing value aborts startup.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.common.database import DatabaseClient
from src.common.error_handling import JobBoardError
from src.common.logger import get_logger, setup_logging
from src.common.repositories import RepositoryConfig, get_job_repository
from src.services.applicant_tracking_service import ApplicantTracker, ApplicationHistory
from src.services.job_board_service import JobBoardService
from version import __version__ as APP_VERSION

from .config import get_settings
from .routes import api_router, auth_router, employer_router, jobs_router
from .templating import templates


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect the store for the life of the app."""
    load_dotenv()
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    log = get_logger(__name__, operation="startup")

    config = RepositoryConfig.from_env()
    db_client = DatabaseClient.from_config(config)
    await db_client.ensure_indexes(config.collection)

    app.state.db_client = db_client
    app.state.job_service = JobBoardService(get_job_repository(db_client, config.collection))
    log.info(f"Job board {APP_VERSION} started ({settings.environment})")
    try:
        yield
    finally:
        await db_client.close()
        log.info("Job board stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="Job Board", version=APP_VERSION, lifespan=lifespan)

    # In-memory mocks live as long as the process
    app.state.applicant_tracker = ApplicantTracker()
    app.state.application_history = ApplicationHistory()

    app.include_router(api_router)
    app.include_router(auth_router)
    app.include_router(employer_router)
    app.include_router(jobs_router)

    @app.exception_handler(JobBoardError)
    async def job_board_error_handler(request: Request, exc: JobBoardError):
        if request.url.path.startswith("/api/"):
            return JSONResponse(status_code=500, content={"detail": str(exc)})
        return templates.TemplateResponse(
            request, "error.html", {"error": str(exc)}, status_code=500
        )

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": APP_VERSION}

    return app


app = create_app()
