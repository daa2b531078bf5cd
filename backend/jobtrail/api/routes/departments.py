"""Department Routes — onboard a department together with its founding manager.

Invariants:
    - Department and manager are created in one deferred-constraint transaction
    - The manager's first job history row names the new department
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.infrastructure.database import get_db
from jobtrail.schemas.department import (
    DepartmentOnboard, DepartmentOnboardResponse, DepartmentResponse,
)
from jobtrail.schemas.employee import EmployeeResponse
from jobtrail.services.department_service import DepartmentService
from jobtrail.api.routes.employees import build_recorder

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/departments", tags=["departments"])


@router.post(
    "", response_model=DepartmentOnboardResponse,
    status_code=status.HTTP_201_CREATED,
)
async def onboard_department(
    body: DepartmentOnboard, db: AsyncSession = Depends(get_db),
):
    """Create a department and its manager."""
    service = DepartmentService(db, build_recorder(db))
    department, manager = await service.onboard_department(
        body.name, body.location_id, body.manager.model_dump(),
    )
    return DepartmentOnboardResponse(
        department=DepartmentResponse.model_validate(department),
        manager=EmployeeResponse.model_validate(manager),
    )
