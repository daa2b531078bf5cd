"""Country ORM — two-letter country code owned by a region.

Invariants:
    - id is the ISO-style 2-char code
    - region_id is mandatory (Regions is mandatory to Countries)

Design Decisions:
    - Default NO ACTION on delete: a region referenced by a country cannot be removed
"""

from sqlalchemy import CHAR, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jobtrail.db.base import Base


class Country(Base):
    """Country within a region."""
    __tablename__ = "countries"

    id: Mapped[str] = mapped_column("country_id", CHAR(2), primary_key=True)
    name: Mapped[str | None] = mapped_column(
        "country_name", String(40), nullable=True,
    )
    region_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("regions.region_id"), nullable=False,
    )
