"""Department ORM — one half of the department <-> employee foreign-key cycle.

Invariants:
    - manager_id is mandatory and unique (one-to-one with an Employee)
    - location_id is mandatory

Design Decisions:
    - manager FK uses use_alter: it is added after both tables exist, since
      neither table can be created first with both FKs in place
    - manager FK is DEFERRABLE INITIALLY IMMEDIATE: checked per statement by default,
      deferred to commit only inside services/constraints.defer_constraints()
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jobtrail.db.base import Base


class Department(Base):
    """Department entity — managed by exactly one employee."""
    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(
        "department_id", Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str | None] = mapped_column(
        "department_name", String(30), nullable=True,
    )
    manager_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey(
            "employees.employee_id",
            name="fk_departments_manager_id",
            use_alter=True,
            deferrable=True,
            initially="IMMEDIATE",
        ),
        nullable=False,
        unique=True,
    )
    location_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("locations.location_id"), nullable=False,
    )
