from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from placebook.schemas.place import AddressResponse, MapPreviewResponse
from placebook.services.location_service import GeocodingError, LocationService

router = APIRouter(prefix="/location", tags=["location"])


def _get_location_service(request: Request) -> LocationService:
    svc = getattr(getattr(request.app, "state", None), "location_service", None)
    if not svc:
        raise RuntimeError("LocationService not configured")
    return svc


@router.get("/preview", response_model=MapPreviewResponse)
def map_preview(request: Request, lat: float = Query(..., ge=-90, le=90), lng: float = Query(..., ge=-180, le=180)):
    svc = _get_location_service(request)
    return {"url": svc.map_preview_url(lat, lng)}


@router.get("/address", response_model=AddressResponse)
def address(request: Request, lat: float = Query(..., ge=-90, le=90), lng: float = Query(..., ge=-180, le=180)):
    svc = _get_location_service(request)
    try:
        return {"address": svc.reverse_geocode(lat, lng)}
    except GeocodingError as exc:
        raise HTTPException(502, str(exc))
