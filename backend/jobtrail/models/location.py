"""Location ORM — street address where departments are housed.

Invariants:
    - country_id is mandatory (Countries is mandatory to Locations)
"""

from sqlalchemy import CHAR, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jobtrail.db.base import Base


class Location(Base):
    """Physical location of a department."""
    __tablename__ = "locations"

    id: Mapped[int] = mapped_column(
        "location_id", Integer, primary_key=True, autoincrement=True,
    )
    street_address: Mapped[str | None] = mapped_column(
        String(25), nullable=True,
    )
    postal_code: Mapped[str | None] = mapped_column(String(12), nullable=True)
    city: Mapped[str | None] = mapped_column(String(30), nullable=True)
    state_province: Mapped[str | None] = mapped_column(
        String(12), nullable=True,
    )
    country_id: Mapped[str] = mapped_column(
        CHAR(2), ForeignKey("countries.country_id"), nullable=False,
    )
