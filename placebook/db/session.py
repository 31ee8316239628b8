"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from placebook.core.config import get_settings

Base = declarative_base()


def create_engine_for(url: str) -> Engine:
    """Build an engine for ``url``; the database file is created on first connect."""
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
        # an in-memory database lives inside one connection; share it across threads
        return create_engine(
            url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, future=True, pool_pre_ping=True)


@lru_cache
def get_engine() -> Engine:
    return create_engine_for(get_settings().database_url)


def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@lru_cache
def _get_sessionmaker() -> sessionmaker:
    return session_factory(get_engine())


@contextmanager
def get_session(factory: sessionmaker | None = None) -> Iterator[Session]:
    session: Session = (factory or _get_sessionmaker())()
    try:
        yield session
    finally:
        session.close()
