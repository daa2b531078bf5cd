"""Employee Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Field lengths mirror the employees table (names 20/25, email 25, phone 20)
    - EmployeeUpdate is partial: only fields explicitly sent are applied
    - Mandatory columns (names, email, job_id, department_id) cannot be nulled by an update
    - HistoryRecordResponse mirrors core.domain_types.HistoryRecord field for field

Design Decisions:
    - from_attributes on responses: built straight from ORM rows / frozen dataclasses
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_REQUIRED_ON_UPDATE = (
    "first_name", "last_name", "email", "job_id", "department_id",
)


class EmployeeCreate(BaseModel):
    """Employee creation — appends the first job history row."""
    first_name: str = Field(min_length=1, max_length=20)
    last_name: str = Field(min_length=1, max_length=25)
    email: str = Field(min_length=3, max_length=25, pattern=r"^[^@\s]+@[^@\s]+$")
    phone_number: str | None = Field(None, max_length=20)
    hire_date: date | None = None
    job_id: str = Field(min_length=1, max_length=10)
    salary: Decimal | None = Field(None, ge=0)
    commission_pct: int | None = Field(None, ge=0, le=100)
    manager_id: int | None = Field(None, ge=1)
    department_id: int = Field(ge=1)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class EmployeeUpdate(BaseModel):
    """Partial employee update — a job_id change appends a history row."""
    first_name: str | None = Field(None, min_length=1, max_length=20)
    last_name: str | None = Field(None, min_length=1, max_length=25)
    email: str | None = Field(
        None, min_length=3, max_length=25, pattern=r"^[^@\s]+@[^@\s]+$",
    )
    phone_number: str | None = Field(None, max_length=20)
    hire_date: date | None = None
    job_id: str | None = Field(None, min_length=1, max_length=10)
    salary: Decimal | None = Field(None, ge=0)
    commission_pct: int | None = Field(None, ge=0, le=100)
    manager_id: int | None = Field(None, ge=1)
    department_id: int | None = Field(None, ge=1)

    @model_validator(mode="after")
    def reject_null_mandatory(self) -> "EmployeeUpdate":
        for name in _REQUIRED_ON_UPDATE:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class EmployeeResponse(BaseModel):
    """Employee response — current attributes."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    hire_date: date | None
    job_id: str
    salary: Decimal | None
    commission_pct: int | None
    manager_id: int | None
    department_id: int


class HistoryRecordResponse(BaseModel):
    """One row of an employee's job timeline."""
    model_config = ConfigDict(from_attributes=True)

    employee_id: int
    start_date: date
    end_date: date | None
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    hire_date: date | None
    job_id: str
    min_salary: Decimal | None
    max_salary: Decimal | None
    salary: Decimal | None
    commission_pct: int | None
    manager_id: int | None
    department_id: int


class HistoryResponse(BaseModel):
    employee_id: int
    history: list[HistoryRecordResponse]
