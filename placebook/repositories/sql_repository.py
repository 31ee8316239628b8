"""Data access for places backed by SQLAlchemy."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from placebook.db.create_tables import create_all
from placebook.db.models import PlaceRow
from placebook.db.session import get_engine, get_session, session_factory
from placebook.domain.place import Place, place_from_row

logger = logging.getLogger(__name__)

places_table = PlaceRow.__table__


@dataclass(frozen=True)
class InsertResult:
    """What the driver reports back after an insert."""

    insert_id: int
    rows_affected: int


class PlaceRepository:
    """CRUD helpers for the ``places`` table.

    The repository owns a single engine, reused by every call; each call runs
    in its own session so a failed statement leaves nothing behind. Errors
    raised by SQLAlchemy are never caught here.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine
        self._sessions: sessionmaker | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = get_engine()
        return self._engine

    @property
    def sessions(self) -> sessionmaker:
        if self._sessions is None:
            self._sessions = session_factory(self.engine)
        return self._sessions

    def initialize(self) -> None:
        create_all(self.engine)

    def insert_place(self, place: Place) -> InsertResult:
        stmt = insert(places_table).values(
            {
                places_table.c.title: place.title,
                places_table.c.imageUri: place.image_uri,
                places_table.c.address: place.address,
                places_table.c.lat: place.location.lat,
                places_table.c.lng: place.location.lng,
            }
        )
        with get_session(self.sessions) as session:
            result = session.execute(stmt)
            session.commit()
            insert_id = int(result.inserted_primary_key[0])
            outcome = InsertResult(insert_id=insert_id, rows_affected=result.rowcount)
        logger.debug("Inserted place %s (%r)", insert_id, place.title)
        return outcome

    def fetch_places(self) -> list[Place]:
        with get_session(self.sessions) as session:
            rows = session.execute(select(places_table)).mappings().all()
            return [place_from_row(row) for row in rows]

    def fetch_place(self, place_id: int) -> Optional[Place]:
        stmt = select(places_table).where(places_table.c.id == place_id)
        with get_session(self.sessions) as session:
            row = session.execute(stmt).mappings().first()
            return place_from_row(row) if row else None
