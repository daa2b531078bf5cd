"""Employee Routes — employee writes (audited) and the job history timeline.

Invariants:
    - POST and PATCH go through EmployeeService, so every write reaches the audit recorder
    - GET /{id}/history returns 404 for unknown ids, an empty list for an
      employee without history rows
    - Domain errors propagate to the global JobTrailError handler

Design Decisions:
    - build_recorder exported for reuse by the departments route: one place
      reads the close-out setting
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.config import get_settings
from jobtrail.infrastructure.database import get_db
from jobtrail.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeUpdate,
    HistoryRecordResponse, HistoryResponse,
)
from jobtrail.services.audit_recorder import AuditRecorder
from jobtrail.services.employee_service import EmployeeService
from jobtrail.services.history_reporter import HistoryReporter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


def build_recorder(db: AsyncSession) -> AuditRecorder:
    """Audit recorder configured from settings. Exported for departments route."""
    settings = get_settings()
    return AuditRecorder(
        db, close_prior_on_change=settings.history_close_prior_on_change,
    )


@router.post(
    "", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate, db: AsyncSession = Depends(get_db),
):
    """Create an employee; records the first job history row."""
    service = EmployeeService(db, build_recorder(db))
    employee = await service.create_employee(body.model_dump())
    return EmployeeResponse.model_validate(employee)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int = Path(ge=1), db: AsyncSession = Depends(get_db),
):
    """Get current employee attributes."""
    employee = await EmployeeService(db).get_employee(employee_id)
    return EmployeeResponse.model_validate(employee)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    body: EmployeeUpdate,
    employee_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Update an employee; a job change appends a history row."""
    service = EmployeeService(db, build_recorder(db))
    employee = await service.update_employee(employee_id, body.changes())
    return EmployeeResponse.model_validate(employee)


@router.get("/{employee_id}/history", response_model=HistoryResponse)
async def get_employee_history(
    employee_id: int = Path(ge=1), db: AsyncSession = Depends(get_db),
):
    """Job history timeline, earliest assignment first."""
    records = await HistoryReporter(db).get_history(employee_id)
    return HistoryResponse(
        employee_id=employee_id,
        history=[HistoryRecordResponse.model_validate(r) for r in records],
    )
