"""History Reporter — read-only reconstruction of one employee's job timeline.

Invariants:
    - employee_id must be >= 1 (InvalidEmployeeIdError otherwise)
    - Existence checked BEFORE history is queried: unknown id raises
      EmployeeNotFoundError, an existing employee without rows yields []
    - Records ordered by start_date ascending
    - No writes, no flush of pending state beyond SQLAlchemy autoflush

Design Decisions:
    - Outer join to jobs: a history row is still reported if its job's salary
      band cannot be resolved (min/max become None)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.core.domain_types import HistoryRecord
from jobtrail.core.errors import EmployeeNotFoundError, InvalidEmployeeIdError
from jobtrail.core.history_timeline import build_timeline
from jobtrail.models.employee import Employee
from jobtrail.models.job import Job
from jobtrail.models.job_history import JobHistory

logger = logging.getLogger(__name__)


class HistoryReporter:
    """Read side of the audit trail."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_history(self, employee_id: int) -> list[HistoryRecord]:
        if employee_id < 1:
            raise InvalidEmployeeIdError(employee_id)

        result = await self.db.execute(
            select(Employee).where(Employee.id == employee_id),
        )
        employee = result.scalar_one_or_none()
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        result = await self.db.execute(
            select(JobHistory, Job)
            .outerjoin(Job, Job.id == JobHistory.job_id)
            .where(JobHistory.employee_id == employee_id)
            .order_by(JobHistory.start_date.asc()),
        )
        rows = result.all()
        jobs = {job.id: job for _, job in rows if job is not None}
        records = build_timeline(employee, [entry for entry, _ in rows], jobs)
        logger.debug(
            f"History loaded: {len(records)} row(s)",
            extra={"employee_id": employee_id},
        )
        return records
