"""
Base class for grocery store image lookups.

A lookup takes the name a user typed for a shopping list item and returns
the URL of a product picture for it, or None when nothing matches.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ImageLookupError(Exception):
    """An image search request failed (network, auth, or bad response)."""


class GroceryAPIBase(ABC):
    """Abstract base class for grocery store image lookups."""

    @property
    @abstractmethod
    def store_name(self) -> str:
        """Return the store name (e.g., 'Kroger')."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the API credentials are configured."""
        pass

    @abstractmethod
    async def search_image(self, term: str) -> Optional[str]:
        """
        Find a product image for a search term.

        Args:
            term: The item name to search for

        Returns:
            Image URL of the best match, or None if no product matched

        Raises:
            ImageLookupError: if the lookup itself failed
        """
        pass


class NullImageSearch(GroceryAPIBase):
    """Lookup used when no store API is configured; never finds an image."""

    @property
    def store_name(self) -> str:
        return "None"

    def is_configured(self) -> bool:
        return False

    async def search_image(self, term: str) -> Optional[str]:
        return None
