from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from placebook.app import create_app
from placebook.core.config import Settings
from placebook.domain.place import Location, Place
from placebook.repositories.sql_repository import PlaceRepository
from placebook.services.location_service import GeocodingError

from conftest import FakeLocator


@pytest.fixture()
def client(temp_db, locator):
    app = create_app(Settings(database_url=f"sqlite:///{temp_db}"), repository=PlaceRepository(), locator=locator)
    with TestClient(app) as c:
        yield c


def test_add_and_fetch_place(client):
    resp = client.post(
        "/places",
        json={"title": "Park", "image_uri": "file://a.jpg", "lat": 10.5, "lng": 20.25, "address": "Main St"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body == {
        "id": 1,
        "title": "Park",
        "image_uri": "file://a.jpg",
        "address": "Main St",
        "location": {"lat": 10.5, "lng": 20.25},
    }

    assert client.get("/places/1").json() == body
    assert client.get("/places").json() == [body]


def test_unknown_place_is_404(client):
    assert client.get("/places/99").status_code == 404


def test_invalid_place_is_400(client):
    resp = client.post("/places", json={"title": " ", "image_uri": "file://a.jpg", "lat": 1, "lng": 2})
    assert resp.status_code == 400
    assert client.get("/places").json() == []


def test_geocoding_failure_is_502(temp_db):
    locator = FakeLocator(error=GeocodingError("Failed to fetch address!"))
    app = create_app(Settings(), repository=PlaceRepository(), locator=locator)
    with TestClient(app) as c:
        resp = c.post("/places", json={"title": "Park", "image_uri": "file://a.jpg", "lat": 1, "lng": 2})
        assert resp.status_code == 502
        assert resp.json()["detail"] == "Failed to fetch address!"
        assert c.get("/location/address", params={"lat": 1, "lng": 2}).status_code == 502


def test_location_helpers(client):
    preview = client.get("/location/preview", params={"lat": 10.5, "lng": 20.25})
    assert preview.status_code == 200
    assert preview.json() == {"url": "https://maps.test/static?center=10.5,20.25"}

    address = client.get("/location/address", params={"lat": 10.5, "lng": 20.25})
    assert address.json() == {"address": "Main St"}

    assert client.get("/location/preview", params={"lat": 100, "lng": 0}).status_code == 422


def test_app_writes_to_configured_database(temp_db, tmp_path, locator):
    other = tmp_path / "other.db"
    app = create_app(Settings(database_url=f"sqlite:///{other}"), locator=locator)
    repository = app.state.place_service.repository
    try:
        with TestClient(app) as c:
            resp = c.post(
                "/places",
                json={"title": "Park", "image_uri": "file://a.jpg", "lat": 10.5, "lng": 20.25},
            )
            assert resp.status_code == 201
        assert other.exists()
        assert [p.title for p in repository.fetch_places()] == ["Park"]
        # the environment database was never touched
        env_repo = PlaceRepository()
        env_repo.initialize()
        assert env_repo.fetch_places() == []
    finally:
        repository.engine.dispose()


def test_stored_rows_outside_coordinate_ranges_are_listed(client):
    repository = client.app.state.place_service.repository
    repository.insert_place(Place(title="Odd", image_uri="file://o.jpg", address="?", location=Location(95.0, 200.0)))
    repository.insert_place(Place(title="Park", image_uri="file://a.jpg", address="Main St", location=Location(1.0, 2.0)))

    resp = client.get("/places")
    assert resp.status_code == 200
    by_title = {p["title"]: p for p in resp.json()}
    assert by_title["Odd"]["location"] == {"lat": 95.0, "lng": 200.0}
    assert by_title["Park"]["location"] == {"lat": 1.0, "lng": 2.0}
    assert client.get("/places/1").json()["location"] == {"lat": 95.0, "lng": 200.0}


def test_new_places_still_need_valid_coordinates(client):
    resp = client.post("/places", json={"title": "Park", "image_uri": "file://a.jpg", "lat": 95, "lng": 2})
    assert resp.status_code == 422
    assert client.get("/places").json() == []
