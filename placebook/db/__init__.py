"""Database helpers (engine/session export)."""

from .session import Base, create_engine_for, get_engine, get_session, session_factory

__all__ = ["Base", "create_engine_for", "get_engine", "get_session", "session_factory"]
