"""Job Service — job writes with last_update stamping.

Invariants:
    - last_update is set to the clock's now on every insert and update,
      overriding any value supplied by the caller
    - Salary band validated (0 <= min <= max) before anything is flushed
    - A duplicate job code is a DuplicateJobError whether caught by the
      existence check or by the primary key at commit
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.core.errors import (
    DuplicateJobError, ResourceNotFoundError, SalaryBandError,
)
from jobtrail.models.job import Job, DEFAULT_MAX_SALARY, DEFAULT_MIN_SALARY
from jobtrail.services.audit_recorder import Clock, utc_now

logger = logging.getLogger(__name__)


def check_salary_band(
    job_id: str, min_salary: Decimal | None, max_salary: Decimal | None,
) -> None:
    low = DEFAULT_MIN_SALARY if min_salary is None else min_salary
    high = DEFAULT_MAX_SALARY if max_salary is None else max_salary
    if low < 0 or high < 0 or low > high:
        raise SalaryBandError(job_id, low, high)


class JobService:
    """Creates and updates jobs."""

    def __init__(self, db: AsyncSession, clock: Clock = utc_now):
        self.db = db
        self._clock = clock

    async def get_job(self, job_id: str) -> Job | None:
        result = await self.db.execute(select(Job).where(Job.id == job_id))
        return result.scalar_one_or_none()

    async def create_job(self, data: Mapping[str, Any]) -> Job:
        fields = dict(data)
        job_id = fields["id"]
        check_salary_band(
            job_id, fields.get("min_salary"), fields.get("max_salary"),
        )
        if await self.get_job(job_id) is not None:
            raise DuplicateJobError(job_id)

        fields["last_update"] = self._clock()
        job = Job(**fields)
        self.db.add(job)
        try:
            await self.db.commit()
        except IntegrityError as e:
            # inserted concurrently after the existence check
            await self.db.rollback()
            logger.warning(
                f"Job insert rejected: {e.orig}",
                extra={"job_id": job_id, "error_code": "DUPLICATE_JOB"},
            )
            raise DuplicateJobError(job_id) from e
        logger.info("Job created", extra={"job_id": job_id})
        return job

    async def update_job(self, job_id: str, changes: Mapping[str, Any]) -> Job:
        job = await self.get_job(job_id)
        if job is None:
            raise ResourceNotFoundError("Job", job_id)
        check_salary_band(
            job_id,
            changes.get("min_salary", job.min_salary),
            changes.get("max_salary", job.max_salary),
        )
        for name, value in changes.items():
            if name in ("id", "last_update"):
                continue
            setattr(job, name, value)
        job.last_update = self._clock()
        await self.db.commit()
        logger.info("Job updated", extra={"job_id": job_id})
        return job
