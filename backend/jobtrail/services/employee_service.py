"""Employee Service — the employee write path and the audit trail hook site.

Invariants:
    - Every create/update runs in one transaction: employee write, flush,
      AuditRecorder.record_if_changed, commit
    - Any failure (history append included) rolls back the whole write
    - The "before" snapshot is taken before changes are applied to the ORM row
    - manager_id == id is rejected before anything is flushed

Design Decisions:
    - Recorder injected: callers (routes, onboarding, tests) share one
      clock/close-out configuration per request
    - Integrity errors on the employee row itself (duplicate email, unknown
      job or department) map to the 409 WriteRejectedError; those
      from the history append arrive as HistoryWriteError
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.core.domain_types import EmployeeSnapshot
from jobtrail.core.errors import (
    EmployeeNotFoundError, ErrorContext, JobTrailError, SelfManagementError,
    WriteRejectedError,
)
from jobtrail.models.employee import Employee
from jobtrail.services.audit_recorder import AuditRecorder

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = frozenset({"id"})


class EmployeeService:
    """Creates and updates employees, keeping the job history in step."""

    def __init__(self, db: AsyncSession, recorder: AuditRecorder | None = None):
        self.db = db
        self.recorder = recorder or AuditRecorder(db)

    async def get_employee(self, employee_id: int) -> Employee:
        result = await self.db.execute(
            select(Employee).where(Employee.id == employee_id),
        )
        employee = result.scalar_one_or_none()
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def create_employee(self, data: Mapping[str, Any]) -> Employee:
        """Insert an employee and its first job history row."""
        employee = Employee(**dict(data))
        try:
            self.db.add(employee)
            await self._flush("insert", employee)
            await self.recorder.record_if_changed(employee, None)
            await self.db.commit()
        except JobTrailError:
            await self.db.rollback()
            raise
        logger.info(
            "Employee created",
            extra={"employee_id": employee.id, "job_id": employee.job_id},
        )
        return employee

    async def update_employee(
        self, employee_id: int, changes: Mapping[str, Any],
    ) -> Employee:
        """Apply changes; a job change appends a history row."""
        employee = await self.get_employee(employee_id)
        if changes.get("manager_id") is not None and changes["manager_id"] == employee.id:
            raise SelfManagementError(employee.id)

        before = EmployeeSnapshot.of(employee)
        try:
            for name, value in changes.items():
                if name in _IMMUTABLE_FIELDS:
                    continue
                setattr(employee, name, value)
            await self._flush("update", employee)
            await self.recorder.record_if_changed(employee, before)
            await self.db.commit()
        except JobTrailError:
            await self.db.rollback()
            raise
        logger.info(
            "Employee updated",
            extra={"employee_id": employee.id, "job_id": employee.job_id},
        )
        return employee

    async def _flush(self, operation: str, employee: Employee) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning(
                f"Employee write rejected: {e.orig}",
                extra={
                    "employee_id": employee.id,
                    "job_id": employee.job_id,
                    "operation": operation,
                    "error_code": "WRITE_REJECTED",
                },
            )
            raise WriteRejectedError(
                "Employee", operation,
                ErrorContext(
                    employee_id=employee.id,
                    job_id=employee.job_id,
                    department_id=employee.department_id,
                ),
            ) from e
