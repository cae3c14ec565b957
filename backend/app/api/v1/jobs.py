"""
Job API v1 Endpoints

Job catalog endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import BaseApplicationException
from app.core.security import get_current_user
from app.schemas.job import JobCreate, JobResponse
from app.schemas.user import CurrentUser
from app.api.deps import get_job_service
from app.services.job_service import JobService
from app.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/", response_model=List[JobResponse])
async def get_jobs(job_service: JobService = Depends(get_job_service)):
    """Job catalog in catalog order."""
    try:
        jobs = await job_service.list_jobs()
    except BaseApplicationException:
        raise
    except Exception as e:
        logger.error(f"Error getting jobs: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve jobs"
        )
    return [JobResponse.model_validate(job) for job in jobs]


@router.get("/{title:path}", response_model=JobResponse)
async def get_job(title: str, job_service: JobService = Depends(get_job_service)):
    """Get job by title."""
    job = await job_service.get_job(title)
    return JobResponse.model_validate(job)


@router.post("/", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreate,
    current_user: CurrentUser = Depends(get_current_user),
    job_service: JobService = Depends(get_job_service)
):
    """Add a job to the catalog."""
    logger.info("Creating job", title=job_data.title, user_id=current_user.id)
    job = await job_service.create_job(job_data)
    return JobResponse.model_validate(job)
