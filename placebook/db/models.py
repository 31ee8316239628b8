"""SQLAlchemy model for the on-device ``places`` table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, REAL, Text

from .session import Base


class PlaceRow(Base):
    """One stored place; column names match existing ``places.db`` files."""

    __tablename__ = "places"

    id = Column(Integer, primary_key=True, nullable=False)
    title = Column(Text, nullable=False)
    image_uri = Column("imageUri", Text, nullable=False)
    address = Column(Text, nullable=False)
    lat = Column(REAL, nullable=False)
    lng = Column(REAL, nullable=False)
