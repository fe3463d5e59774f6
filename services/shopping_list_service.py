"""
Shopping List Service - the observable item list and its persistence.

This service is the screen's view-model:
- Holds the current items in an ItemStream that views and controllers
  subscribe to
- Loads and saves the list through ShoppingItemRepository
- Saves checked-out orders through OrderRepository
- Looks up product images, treating any lookup failure as "no image"
"""

import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from config.database import SessionLocal
from models.items import Item, OrderRecord
from models.repositories import OrderRepository, ShoppingItemRepository
from services.grocery_apis import GroceryAPIBase, ImageLookupError, get_image_search

logger = logging.getLogger(__name__)

ItemsCallback = Callable[[list[Item]], None]


class ItemStream:
    """
    Current item list with change notification.

    One writer (the controller) calls set(); any number of readers
    subscribe and are called with the new list after every set().
    """

    def __init__(self, items: Optional[list[Item]] = None):
        self._items: list[Item] = list(items or [])
        self._subscribers: list[ItemsCallback] = []

    @property
    def value(self) -> list[Item]:
        """A copy of the current items."""
        return list(self._items)

    def set(self, items: list[Item]):
        """Replace the items and notify subscribers."""
        self._items = list(items)
        for callback in list(self._subscribers):
            try:
                callback(self.value)
            except Exception:
                logger.exception("Item stream subscriber failed")

    def subscribe(self, callback: ItemsCallback) -> Callable[[], None]:
        """Register a callback; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


class ShoppingListService:
    """Service owning the item stream, the stores and the image lookup."""

    def __init__(
        self,
        stream: Optional[ItemStream] = None,
        session_factory: Callable[[], Session] = SessionLocal,
        image_search: Optional[GroceryAPIBase] = None,
    ):
        self.stream = stream if stream is not None else ItemStream()
        self.session_factory = session_factory
        self.image_search = image_search if image_search is not None else get_image_search()

    @property
    def items(self) -> list[Item]:
        """Current items."""
        return self.stream.value

    # ==========================================
    # Shopping List
    # ==========================================

    def load_items(self) -> list[Item]:
        """
        Load the stored list into the stream.

        Raises:
            PersistenceError: if the store could not be read
        """
        db = self.session_factory()
        try:
            items = ShoppingItemRepository(db).load()
        finally:
            db.close()

        logger.info(f"Loaded {len(items)} shopping items")
        self.stream.set(items)
        return items

    def update_items(self, items: list[Item]):
        """Publish a new list to subscribers (in memory only)."""
        self.stream.set(items)

    def save_items(self, items: list[Item]):
        """
        Persist the full list.

        Raises:
            PersistenceError: if the store could not be written
        """
        db = self.session_factory()
        try:
            ShoppingItemRepository(db).save(items)
        finally:
            db.close()

    # ==========================================
    # Orders
    # ==========================================

    def save_orders(self, records: list[OrderRecord]):
        """
        Replace the saved orders; an empty list clears them.

        Raises:
            PersistenceError: if the store could not be written
        """
        db = self.session_factory()
        try:
            OrderRepository(db).save(records)
        finally:
            db.close()
        logger.info(f"Orders saved: {len(records)}")

    def load_orders(self) -> list[OrderRecord]:
        """
        Load the orders saved at the last checkout.

        Raises:
            PersistenceError: if the store could not be read
        """
        db = self.session_factory()
        try:
            return OrderRepository(db).load()
        finally:
            db.close()

    # ==========================================
    # Image Lookup
    # ==========================================

    async def search_image(self, name: str) -> Optional[str]:
        """Find an image URL for an item name; None when not found or on failure."""
        try:
            return await self.image_search.search_image(name)
        except ImageLookupError as e:
            logger.warning(f"Image lookup failed for '{name}': {e}")
            return None
