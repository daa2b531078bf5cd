"""Department Service — two-phase onboarding of a department and its manager.

Invariants:
    - Department.manager_id and Employee.department_id are both mandatory, so
      neither row can be inserted first with valid references
    - Constraints are deferred for the onboarding transaction only and checked at commit
    - The manager's creation is recorded in job history with the real department
    - Constraint violations (unknown location, email already taken) surface as
      409 WriteRejectedError after a full rollback

Design Decisions:
    - Placeholder lives on the employee (department_id), not on the department:
      departments.manager_id is UNIQUE, a shared placeholder would collide
    - History recorded after the fixup so the first row names the new department
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.core.errors import (
    ErrorContext, JobTrailError, WriteRejectedError,
)
from jobtrail.models.department import Department
from jobtrail.models.employee import Employee
from jobtrail.services.audit_recorder import AuditRecorder
from jobtrail.services.constraints import defer_constraints

logger = logging.getLogger(__name__)

PLACEHOLDER_DEPARTMENT_ID = 0


class DepartmentService:
    """Creates departments together with their founding manager."""

    def __init__(self, db: AsyncSession, recorder: AuditRecorder | None = None):
        self.db = db
        self.recorder = recorder or AuditRecorder(db)

    async def onboard_department(
        self, name: str, location_id: int, manager: Mapping[str, Any],
    ) -> tuple[Department, Employee]:
        """Insert department + manager in one deferred-constraint transaction."""
        try:
            await defer_constraints(self.db)

            employee = Employee(
                **dict(manager), department_id=PLACEHOLDER_DEPARTMENT_ID,
            )
            self.db.add(employee)
            await self.db.flush()

            department = Department(
                name=name, manager_id=employee.id, location_id=location_id,
            )
            self.db.add(department)
            await self.db.flush()

            employee.department_id = department.id
            await self.db.flush()

            await self.recorder.record_if_changed(employee, None)
            await self.db.commit()
        except JobTrailError:
            await self.db.rollback()
            raise
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Department onboarding rejected: {e.orig}",
                extra={"operation": "onboard", "error_code": "WRITE_REJECTED"},
            )
            raise WriteRejectedError(
                "Department", "onboard",
                ErrorContext(debug_info={"name": name, "location_id": location_id}),
            ) from e

        logger.info(
            f"Department '{name}' onboarded",
            extra={"department_id": department.id, "employee_id": employee.id},
        )
        return department, employee
