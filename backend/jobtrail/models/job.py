"""Job ORM — job code with title and salary band.

Invariants:
    - id is the job code (<= 10 chars)
    - 0 <= min_salary <= max_salary (table check constraints)
    - last_update is stamped by the write path on every insert/update,
      overriding any caller-supplied value (services/job_service.py)

Design Decisions:
    - Numeric(12, 2) for salaries: exact money arithmetic, portable across PostgreSQL and SQLite
    - last_update nullable at the column level: rows backfilled by migration 002 start empty
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from jobtrail.db.base import Base

DEFAULT_MIN_SALARY = Decimal("0")
DEFAULT_MAX_SALARY = Decimal("1000000")


class Job(Base):
    """Job entity — referenced by employees and their history rows."""
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint(
            "min_salary >= 0 AND max_salary >= 0",
            name="ck_jobs_salary_non_negative",
        ),
        CheckConstraint(
            "min_salary <= max_salary", name="ck_jobs_salary_band",
        ),
    )

    id: Mapped[str] = mapped_column("job_id", String(10), primary_key=True)
    title: Mapped[str | None] = mapped_column(
        "job_title", String(35), nullable=True,
    )
    min_salary: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), nullable=True, default=DEFAULT_MIN_SALARY,
    )
    max_salary: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), nullable=True, default=DEFAULT_MAX_SALARY,
    )
    last_update: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
