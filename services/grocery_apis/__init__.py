"""
Grocery store API integrations for product image lookup.

Currently supported stores:
- Kroger (and Kroger-owned stores like Ralphs, Fred Meyer, etc.)
"""

from typing import Optional

from config.settings import Settings, get_settings
from services.grocery_apis.base import GroceryAPIBase, ImageLookupError, NullImageSearch
from services.grocery_apis.kroger import KrogerAPI


def get_image_search(settings: Optional[Settings] = None) -> GroceryAPIBase:
    """Return the Kroger lookup when credentials are set, else a no-op lookup."""
    kroger = KrogerAPI(settings or get_settings())
    if kroger.is_configured():
        return kroger
    return NullImageSearch()


__all__ = [
    "GroceryAPIBase",
    "ImageLookupError",
    "KrogerAPI",
    "NullImageSearch",
    "get_image_search",
]
