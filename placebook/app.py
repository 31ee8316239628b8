"""FastAPI application factory for Placebook."""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placebook.core.config import Settings, get_settings
from placebook.core.logging_config import setup_logging
from placebook.db.session import create_engine_for
from placebook.repositories.sql_repository import PlaceRepository
from placebook.routers import location as location_router
from placebook.routers import places as places_router
from placebook.services.location_service import LocationService
from placebook.services.place_service import PlaceService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    repository: PlaceRepository | None = None,
    locator: LocationService | None = None,
) -> FastAPI:
    """Factory compatible with uvicorn (``uvicorn --factory placebook.app:create_app``)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    if repository is None:
        repository = PlaceRepository(create_engine_for(settings.database_url))
    locator = locator or LocationService(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await asyncio.to_thread(repository.initialize)
        logger.info("Places store initialized")
        yield

    app = FastAPI(title="Placebook API", lifespan=lifespan)

    if settings.app_env != "prod":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                "http://localhost:8000",
                "http://127.0.0.1:8000",
                "http://localhost:19006",
                "http://127.0.0.1:19006",
            ],
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    app.state.settings = settings
    app.state.place_service = PlaceService(repository, locator)
    app.state.location_service = locator

    app.include_router(places_router.router)
    app.include_router(location_router.router)
    return app
