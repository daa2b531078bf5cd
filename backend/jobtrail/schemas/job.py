"""Job Schemas — request/response models for the jobs table.

Invariants:
    - last_update is never accepted from clients; the write path stamps it
    - Salary band cross-checked (min <= max) when both are sent
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class JobCreate(BaseModel):
    id: str = Field(min_length=1, max_length=10)
    title: str | None = Field(None, max_length=35)
    min_salary: Decimal = Field(Decimal("0"), ge=0)
    max_salary: Decimal = Field(Decimal("1000000"), ge=0)

    @model_validator(mode="after")
    def check_band(self) -> "JobCreate":
        if self.min_salary > self.max_salary:
            raise ValueError("min_salary must not exceed max_salary")
        return self


class JobUpdate(BaseModel):
    title: str | None = Field(None, max_length=35)
    min_salary: Decimal | None = Field(None, ge=0)
    max_salary: Decimal | None = Field(None, ge=0)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str | None
    min_salary: Decimal | None
    max_salary: Decimal | None
    last_update: datetime | None
