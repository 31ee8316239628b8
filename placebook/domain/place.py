"""Place entity and coordinate helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Location:
    lat: float
    lng: float


@dataclass(frozen=True)
class Place:
    """A saved location. ``id`` stays None until the store assigns one."""

    title: str
    image_uri: str
    address: str
    location: Location
    id: Optional[int] = None

    def with_id(self, place_id: int) -> "Place":
        return replace(self, id=place_id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "image_uri": self.image_uri,
            "address": self.address,
            "location": {"lat": self.location.lat, "lng": self.location.lng},
        }


def place_from_row(row: Mapping[str, Any]) -> Place:
    """Rebuild a Place from a flat ``places`` row (imageUri, lat, lng columns)."""
    return Place(
        id=row["id"],
        title=row["title"],
        image_uri=row["imageUri"],
        address=row["address"],
        location=Location(lat=row["lat"], lng=row["lng"]),
    )


def is_valid_coordinate(lat: float | None, lng: float | None) -> bool:
    """Return True when both values are finite and inside the WGS84 ranges."""
    if lat is None or lng is None:
        return False
    try:
        lat_f, lng_f = float(lat), float(lng)
    except (TypeError, ValueError):
        return False
    if not (math.isfinite(lat_f) and math.isfinite(lng_f)):
        return False
    return -90.0 <= lat_f <= 90.0 and -180.0 <= lng_f <= 180.0
