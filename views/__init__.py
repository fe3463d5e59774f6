"""
Views layer - UI presentation components.
"""

from views.orders_view import OrdersView
from views.shopping_view import ShoppingView

__all__ = ["OrdersView", "ShoppingView"]
