"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EmployeeId, DepartmentId wrap ints; JobId wraps the job code string
    - EmployeeSnapshot is immutable — the before/after images handed to the audit trail
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Snapshots are frozen dataclasses, not ORM rows: the ORM object mutates in place
      during an update, so the "before" image must be copied out first
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)
DepartmentId = NewType("DepartmentId", int)
JobId = NewType("JobId", str)


# ─── Enums ───────────────────────────────────────────────────────

class WriteOperation(str, Enum):
    """Employee write kinds that reach the audit trail."""
    INSERT = "insert"
    UPDATE = "update"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class EmployeeSnapshot:
    """Point-in-time image of the employee columns the audit trail reads."""
    employee_id: EmployeeId
    job_id: JobId
    department_id: DepartmentId

    @classmethod
    def of(cls, employee) -> "EmployeeSnapshot":
        """Copy the relevant columns out of an Employee-like object."""
        return cls(
            employee_id=EmployeeId(employee.id),
            job_id=JobId(employee.job_id),
            department_id=DepartmentId(employee.department_id),
        )


@dataclass(frozen=True)
class HistoryEntryDraft:
    """A job history row that the audit trail decided to append."""
    employee_id: EmployeeId
    start_date: date
    job_id: JobId
    department_id: DepartmentId
    operation: WriteOperation
    end_date: date | None = None


@dataclass(frozen=True)
class HistoryRecord:
    """One row of an employee's reconstructed timeline."""
    employee_id: EmployeeId
    start_date: date
    end_date: date | None
    first_name: str
    last_name: str
    email: str
    phone_number: str | None
    hire_date: date | None
    job_id: JobId
    min_salary: Decimal | None
    max_salary: Decimal | None
    salary: Decimal | None
    commission_pct: int | None
    manager_id: EmployeeId | None
    department_id: DepartmentId
