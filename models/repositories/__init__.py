"""
Repositories - Data access layer for database operations.
"""

from models.repositories.errors import PersistenceError
from models.repositories.order_repository import OrderRepository
from models.repositories.shopping_item_repository import ShoppingItemRepository

__all__ = ["OrderRepository", "PersistenceError", "ShoppingItemRepository"]
