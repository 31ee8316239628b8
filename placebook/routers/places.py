from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Request

from placebook.schemas.place import PlaceCreate, PlaceResponse
from placebook.services.location_service import GeocodingError
from placebook.services.place_service import (
    PlaceService,
    InvalidPlaceError,
    PlaceNotFoundError,
)

router = APIRouter(prefix="/places", tags=["places"])


def _get_place_service(request: Request) -> PlaceService:
    svc = getattr(getattr(request.app, "state", None), "place_service", None)
    if not svc:
        raise RuntimeError("PlaceService not configured")
    return svc


@router.get("", response_model=List[PlaceResponse])
def list_places(request: Request):
    svc = _get_place_service(request)
    return [PlaceResponse.from_place(p) for p in svc.list_places()]


@router.get("/{place_id}", response_model=PlaceResponse)
def get_place(place_id: int, request: Request):
    svc = _get_place_service(request)
    try:
        place = svc.get_place(place_id)
    except PlaceNotFoundError:
        raise HTTPException(404, "Place not found")
    return PlaceResponse.from_place(place)


@router.post("", response_model=PlaceResponse, status_code=201)
def add_place(payload: PlaceCreate, request: Request):
    svc = _get_place_service(request)
    try:
        place = svc.add_place(
            payload.title,
            payload.image_uri,
            payload.lat,
            payload.lng,
            address=payload.address,
        )
    except InvalidPlaceError as exc:
        raise HTTPException(400, str(exc))
    except GeocodingError as exc:
        raise HTTPException(502, str(exc))
    return PlaceResponse.from_place(place)
