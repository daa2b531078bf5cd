"""Department Schemas — onboarding a department together with its founding manager.

Invariants:
    - The manager payload omits department_id: it is assigned by the onboarding fixup
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from jobtrail.schemas.employee import EmployeeResponse


class ManagerCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=20)
    last_name: str = Field(min_length=1, max_length=25)
    email: str = Field(min_length=3, max_length=25, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: str | None = Field(None, max_length=20)
    hire_date: date | None = None
    job_id: str = Field(min_length=1, max_length=10)
    salary: Decimal | None = Field(None, ge=0)
    commission_pct: int | None = Field(None, ge=0, le=100)
    manager_id: int | None = Field(None, ge=1)


class DepartmentOnboard(BaseModel):
    name: str = Field(min_length=1, max_length=30)
    location_id: int = Field(ge=1)
    manager: ManagerCreate


class DepartmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
    manager_id: int
    location_id: int


class DepartmentOnboardResponse(BaseModel):
    department: DepartmentResponse
    manager: EmployeeResponse
