"""Test doubles and small helpers shared by the test modules."""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from services.grocery_apis.base import GroceryAPIBase


def millis(year, month, day, hour=12, minute=0) -> int:
    """UTC wall-clock time as ms since epoch."""
    moment = datetime(year, month, day, hour, minute, tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)


class FakeImageSearch(GroceryAPIBase):
    """Image lookup returning a fixed URL, or raising a fixed error."""

    def __init__(self, url: Optional[str] = None, error: Optional[Exception] = None):
        self.url = url
        self.error = error
        self.calls: list[str] = []

    @property
    def store_name(self) -> str:
        return "Fake"

    def is_configured(self) -> bool:
        return True

    async def search_image(self, term: str) -> Optional[str]:
        self.calls.append(term)
        if self.error:
            raise self.error
        return self.url


class GatedImageSearch(FakeImageSearch):
    """Image lookup that waits until release() is called."""

    def __init__(self, url: Optional[str] = None):
        super().__init__(url=url)
        self._gate = asyncio.Event()
        self.started = asyncio.Event()

    def release(self):
        self._gate.set()

    async def search_image(self, term: str) -> Optional[str]:
        self.calls.append(term)
        self.started.set()
        await self._gate.wait()
        return self.url
