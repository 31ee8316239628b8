"""Place use cases (validation, address lookup, retrieval)."""

from __future__ import annotations

import logging

from placebook.domain.place import Location, Place, is_valid_coordinate
from placebook.repositories.sql_repository import PlaceRepository
from placebook.services.location_service import LocationService

logger = logging.getLogger(__name__)


class PlaceError(Exception):
    """Base exception for place workflow."""


class InvalidPlaceError(PlaceError):
    """Raised when a place is missing a title, an image or a valid coordinate."""


class PlaceNotFoundError(PlaceError):
    """Raised when no stored place has the requested id."""


class PlaceService:
    """Adds places and looks them up through the repository."""

    def __init__(self, repository: PlaceRepository | None = None, locator: LocationService | None = None) -> None:
        self.repository = repository or PlaceRepository()
        self.locator = locator or LocationService()

    def normalize(self, value: str | None) -> str:
        return (value or "").strip()

    def add_place(
        self,
        title: str | None,
        image_uri: str | None,
        lat: float,
        lng: float,
        address: str | None = None,
    ) -> Place:
        title_value = self.normalize(title)
        if not title_value:
            raise InvalidPlaceError("Title is required")
        image_value = self.normalize(image_uri)
        if not image_value:
            raise InvalidPlaceError("An image is required")
        if not is_valid_coordinate(lat, lng):
            raise InvalidPlaceError(f"Invalid coordinate: {lat},{lng}")
        lat, lng = float(lat), float(lng)

        address_value = self.normalize(address) or self.locator.reverse_geocode(lat, lng)
        place = Place(
            title=title_value,
            image_uri=image_value,
            address=address_value,
            location=Location(lat=lat, lng=lng),
        )
        result = self.repository.insert_place(place)
        logger.info("Saved place %s (%s)", result.insert_id, title_value)
        return place.with_id(result.insert_id)

    def list_places(self) -> list[Place]:
        return self.repository.fetch_places()

    def get_place(self, place_id: int) -> Place:
        place = self.repository.fetch_place(place_id)
        if place is None:
            raise PlaceNotFoundError(f"Place {place_id} not found")
        return place
