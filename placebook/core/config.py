"""
Configuration helpers for Placebook.

Settings are read from environment variables so that the database location,
the maps credentials and the geocoding stand-in address are never hard-coded.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_DATABASE_URL = "sqlite:///places.db"
DEFAULT_STATIC_MAP_URL = "https://maps.googleapis.com/maps/api/staticmap"
DEFAULT_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str = "dev"
    database_url: str = DEFAULT_DATABASE_URL
    google_api_key: str = ""
    static_map_url: str = DEFAULT_STATIC_MAP_URL
    geocode_url: str = DEFAULT_GEOCODE_URL
    map_zoom: int = 14
    map_size: str = "400x200"
    map_type: str = "roadmap"
    map_marker: str = "color:red|label:S"
    placeholder_address: str = ""
    http_timeout: float = 10.0
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _float(value: str, default: float = 0.0) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL).strip(),
        google_api_key=os.getenv("GOOGLE_API_KEY", ""),
        static_map_url=os.getenv("STATIC_MAP_URL", DEFAULT_STATIC_MAP_URL).rstrip("/"),
        geocode_url=os.getenv("GEOCODE_URL", DEFAULT_GEOCODE_URL).rstrip("/"),
        map_zoom=_int(os.getenv("MAP_ZOOM", "14"), 14),
        map_size=os.getenv("MAP_SIZE", "400x200"),
        map_type=os.getenv("MAP_TYPE", "roadmap"),
        map_marker=os.getenv("MAP_MARKER", "color:red|label:S"),
        placeholder_address=os.getenv("GEOCODE_PLACEHOLDER_ADDRESS", "").strip(),
        http_timeout=_float(os.getenv("HTTP_TIMEOUT", "10"), 10.0),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
