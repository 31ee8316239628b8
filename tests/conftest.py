from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the placebook package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from placebook.core import config as core_config  # noqa: E402
from placebook.db import session as db_session  # noqa: E402
from placebook.repositories.sql_repository import PlaceRepository  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "places.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.delenv("GEOCODE_PLACEHOLDER_ADDRESS", raising=False)
    _clear_caches()

    yield db_file

    try:
        db_session.get_engine().dispose()
    except Exception:
        pass
    _clear_caches()


@pytest.fixture()
def repo(temp_db):
    repository = PlaceRepository()
    repository.initialize()
    return repository


class FakeLocator:
    """Stands in for LocationService without touching the network."""

    def __init__(self, address: str = "Main St", error: Exception | None = None) -> None:
        self.address = address
        self.error = error
        self.calls: list[tuple[float, float]] = []

    def reverse_geocode(self, lat, lng):
        self.calls.append((lat, lng))
        if self.error:
            raise self.error
        return self.address

    def map_preview_url(self, lat, lng):
        return f"https://maps.test/static?center={lat},{lng}"


@pytest.fixture()
def locator():
    return FakeLocator()
