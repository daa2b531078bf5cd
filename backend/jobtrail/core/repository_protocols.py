"""Boundary Protocols — structural contracts between core and shell.

Invariants:
    - Core NEVER imports from shell (models, services) — dependency arrows point inward only
    - ORM rows reach core functions only through these Protocol types

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM classes satisfy them without inheritance
"""

from datetime import date
from decimal import Decimal
from typing import Protocol


class EmployeeLike(Protocol):
    """Current employee attributes read by the history timeline."""
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


class JobHistoryLike(Protocol):
    """One persisted job history row."""
    employee_id: int
    start_date: date
    end_date: date | None
    job_id: str
    department_id: int


class JobLike(Protocol):
    """Salary band of a job."""
    id: str
    min_salary: Decimal | None
    max_salary: Decimal | None
