"""
Models layer - domain dataclasses and database entities.
"""

from models.entities import Order, ShoppingItem
from models.items import (
    Item,
    OrderRecord,
    compute_subtotal,
    compute_total,
    day_label,
    group_by_day,
    parse_amount,
)

__all__ = [
    # Domain
    "Item",
    "OrderRecord",
    "compute_subtotal",
    "compute_total",
    "day_label",
    "group_by_day",
    "parse_amount",
    # Entities
    "Order",
    "ShoppingItem",
]
