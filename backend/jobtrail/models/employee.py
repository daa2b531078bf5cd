"""Employee ORM — the audited entity.

Invariants:
    - email is unique; first/last name mandatory
    - job_id and department_id are mandatory
    - manager_id is optional, never equal to id, and cleared (SET NULL) when the
      manager row is deleted — it is a back-reference, not ownership
    - Every insert, and every update changing job_id, appends a JobHistory row
      (enforced by services/employee_service.py, not by this model)

Design Decisions:
    - department FK DEFERRABLE: pairs with Department.manager_id for two-phase onboarding
    - No ORM relationships: writes flush explicitly in dependency order, so the
      unit of work never has to sort the department/employee cycle
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint, Date, ForeignKey, Integer, Numeric, String,
)
from sqlalchemy.orm import Mapped, mapped_column

from jobtrail.db.base import Base


class Employee(Base):
    """Employee entity — current attributes; history lives in job_history."""
    __tablename__ = "employees"
    __table_args__ = (
        CheckConstraint(
            "manager_id <> employee_id", name="ck_employees_not_own_manager",
        ),
    )

    id: Mapped[int] = mapped_column(
        "employee_id", Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(20), nullable=False)
    last_name: Mapped[str] = mapped_column(String(25), nullable=False)
    email: Mapped[str] = mapped_column(
        String(25), nullable=False, unique=True,
    )
    phone_number: Mapped[str | None] = mapped_column(
        String(20), nullable=True,
    )
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    job_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("jobs.job_id"), nullable=False,
    )
    salary: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), nullable=True,
    )
    commission_pct: Mapped[int | None] = mapped_column(
        Integer, nullable=True,
    )
    manager_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("employees.employee_id", ondelete="SET NULL"),
        nullable=True,
    )
    department_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey(
            "departments.department_id",
            name="fk_employees_department_id",
            deferrable=True,
            initially="IMMEDIATE",
        ),
        nullable=False,
    )
