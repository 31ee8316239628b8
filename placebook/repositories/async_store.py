"""Awaitable facade over PlaceRepository for asyncio callers."""
from __future__ import annotations

import asyncio
from typing import Optional

from placebook.domain.place import Place
from placebook.repositories.sql_repository import InsertResult, PlaceRepository


class AsyncPlaceStore:
    """Runs each repository call in a worker thread.

    Every coroutine settles once: it returns the repository's value or raises
    its exception unchanged. Concurrent calls are not ordered against each
    other beyond what the database's own locking provides.
    """

    def __init__(self, repository: PlaceRepository | None = None) -> None:
        self.repository = repository or PlaceRepository()

    async def initialize(self) -> None:
        await asyncio.to_thread(self.repository.initialize)

    async def insert_place(self, place: Place) -> InsertResult:
        return await asyncio.to_thread(self.repository.insert_place, place)

    async def fetch_places(self) -> list[Place]:
        return await asyncio.to_thread(self.repository.fetch_places)

    async def fetch_place(self, place_id: int) -> Optional[Place]:
        return await asyncio.to_thread(self.repository.fetch_place, place_id)
