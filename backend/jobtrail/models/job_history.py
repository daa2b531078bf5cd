"""JobHistory ORM — append-only audit trail of job/department assignments.

Invariants:
    - Composite primary key (employee_id, start_date); start_date is a DATE, so
      two appends for one employee on the same day collide
    - end_date NULL means "current"; the audit trail never sets it by default,
      so an employee may hold several open rows
    - Rows are inserted by services/audit_recorder.py and never updated or deleted there

Design Decisions:
    - Inserted through Core insert(), not session.add(): an append must reach the
      database even when a row with the same key is already in the identity map,
      so the collision surfaces as IntegrityError
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jobtrail.db.base import Base


class JobHistory(Base):
    """One assignment interval for one employee."""
    __tablename__ = "job_history"

    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.employee_id"), primary_key=True,
    )
    start_date: Mapped[date] = mapped_column(Date, primary_key=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    job_id: Mapped[str] = mapped_column(
        String(10), ForeignKey("jobs.job_id"), nullable=False,
    )
    department_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("departments.department_id"), nullable=False,
    )
