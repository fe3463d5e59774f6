"""
Services layer - the shopping list view-model and external lookups.
"""

from services.shopping_list_service import ItemStream, ShoppingListService

__all__ = ["ItemStream", "ShoppingListService"]
