"""Region ORM — top of the location hierarchy (region -> country -> location).

Invariants:
    - id is a serial integer primary key
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jobtrail.db.base import Base


class Region(Base):
    """Geographic region."""
    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(
        "region_id", Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str | None] = mapped_column(
        "region_name", String(25), nullable=True,
    )
