"""
Place request/response schemas
"""
from typing import Optional

from pydantic import BaseModel, Field

from placebook.domain.place import Place


class LocationSchema(BaseModel):
    """Stored coordinate; rows from older files are returned as they are"""
    lat: float = Field(..., description="Latitude in decimal degrees")
    lng: float = Field(..., description="Longitude in decimal degrees")


class PlaceCreate(BaseModel):
    """Schema for saving a new place"""
    title: str = Field(..., description="Place title")
    image_uri: str = Field(..., description="Path/URI of the picture taken for the place")
    lat: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    lng: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")
    address: Optional[str] = Field(None, description="Address; reverse geocoded when omitted")


class PlaceResponse(BaseModel):
    """Schema for a stored place"""
    id: int
    title: str
    image_uri: str
    address: str
    location: LocationSchema

    @classmethod
    def from_place(cls, place: Place) -> "PlaceResponse":
        return cls(**place.to_dict())


class MapPreviewResponse(BaseModel):
    url: str


class AddressResponse(BaseModel):
    address: str
