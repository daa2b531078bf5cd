"""Job Routes — create and update jobs; last_update is always server-stamped."""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.infrastructure.database import get_db
from jobtrail.schemas.job import JobCreate, JobResponse, JobUpdate
from jobtrail.services.job_service import JobService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


@router.post(
    "", response_model=JobResponse, status_code=status.HTTP_201_CREATED,
)
async def create_job(body: JobCreate, db: AsyncSession = Depends(get_db)):
    job = await JobService(db).create_job(body.model_dump())
    return JobResponse.model_validate(job)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    body: JobUpdate,
    job_id: str = Path(min_length=1, max_length=10),
    db: AsyncSession = Depends(get_db),
):
    job = await JobService(db).update_job(job_id, body.changes())
    return JobResponse.model_validate(job)
