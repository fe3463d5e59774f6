"""
Controllers layer - orchestration and session state management.
"""

from controllers.orders_controller import OrdersController
from controllers.shopping_controller import ShoppingController

__all__ = ["OrdersController", "ShoppingController"]
