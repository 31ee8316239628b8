"""
Static map previews and reverse geocoding against the Google Maps web APIs.
"""
from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from placebook.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

FETCH_ADDRESS_FAILED = "Failed to fetch address!"


class LocationError(Exception):
    """Base exception for map/geocoding helpers."""


class GeocodingError(LocationError):
    """Raised when the geocoding endpoint cannot produce an address."""


class LocationService:
    """Builds preview URLs and resolves coordinates into addresses."""

    def __init__(self, settings: Settings | None = None, http: requests.Session | None = None) -> None:
        self.settings = settings or get_settings()
        self.http = http or requests.Session()

    def map_preview_url(self, lat: float, lng: float) -> str:
        s = self.settings
        marker = quote(s.map_marker, safe=":")
        return (
            f"{s.static_map_url}?center={lat},{lng}"
            f"&zoom={s.map_zoom}&size={s.map_size}&maptype={s.map_type}"
            f"&markers={marker}%7C{lat},{lng}"
            f"&key={s.google_api_key}"
        )

    def reverse_geocode(self, lat: float, lng: float) -> str:
        """
        Ask the geocoding endpoint for the address at (lat, lng).

        When GEOCODE_PLACEHOLDER_ADDRESS is configured the request is still
        made (and must succeed) but the configured address is returned instead
        of the provider's answer.
        """
        params = {"latlng": f"{lat},{lng}", "key": self.settings.google_api_key}
        try:
            resp = self.http.get(self.settings.geocode_url, params=params, timeout=self.settings.http_timeout)
        except requests.RequestException as exc:
            logger.warning("Geocoding request for %s,%s failed: %s", lat, lng, exc)
            raise GeocodingError(FETCH_ADDRESS_FAILED) from exc
        if not resp.ok:
            logger.warning("Geocoding for %s,%s returned HTTP %s", lat, lng, resp.status_code)
            raise GeocodingError(FETCH_ADDRESS_FAILED)

        if self.settings.placeholder_address:
            return self.settings.placeholder_address

        try:
            data = resp.json()
        except ValueError as exc:
            raise GeocodingError("Geocoding response is not valid JSON") from exc
        results = data.get("results") if isinstance(data, dict) else None
        if not results:
            raise GeocodingError(f"No address found for {lat},{lng}")
        address = (results[0] or {}).get("formatted_address")
        if not address:
            raise GeocodingError(f"No address found for {lat},{lng}")
        return address
