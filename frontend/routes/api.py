"""
Job JSON API

Endpoints:
    GET  /api/jobs           - Search jobs (keyword, location, jobType, experienceLevel)
    GET  /api/jobs/{job_id}  - Get single job
    POST /api/jobs           - Create a job, returns its id
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.common.job_query import SearchCriteria
from src.common.types import JobCreate
from src.services.job_board_service import JobBoardService, job_to_json

from ..dependencies import get_job_service
from .jobs import criteria_from_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


class CreateJobResponse(BaseModel):
    id: str


@router.get("/jobs")
async def search_jobs(
    criteria: SearchCriteria = Depends(criteria_from_query),
    service: JobBoardService = Depends(get_job_service),
) -> List[Dict[str, Any]]:
    jobs = await service.search_jobs(criteria)
    return [job_to_json(job) for job in jobs]


@router.get("/jobs/{job_id}")
async def get_job(
    job_id: str,
    service: JobBoardService = Depends(get_job_service),
) -> Dict[str, Any]:
    job = await service.get_job(job_id)
    if job is None:
        logger.info(f"API job lookup missed: {job_id}")
        raise HTTPException(status_code=404, detail="Job not found")
    return job_to_json(job)


@router.post("/jobs", status_code=201, response_model=CreateJobResponse)
async def create_job(
    job: JobCreate,
    service: JobBoardService = Depends(get_job_service),
) -> CreateJobResponse:
    job_id = await service.post_job(job)
    return CreateJobResponse(id=job_id)
