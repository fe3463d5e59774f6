"""
Orders Controller - reads the orders saved at the last checkout.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from config.settings import Settings, get_settings
from models.items import OrderRecord, compute_total
from models.repositories import PersistenceError
from services.shopping_list_service import ShoppingListService

logger = logging.getLogger(__name__)


@dataclass
class OrdersSummary:
    """Saved orders for display."""
    orders: list[OrderRecord] = field(default_factory=list)
    total: int = 0
    error: Optional[str] = None


class OrdersController:
    """Controller for the My Orders page."""

    def __init__(
        self,
        service: Optional[ShoppingListService] = None,
        settings: Optional[Settings] = None,
    ):
        self.service = service or ShoppingListService()
        self.settings = settings or get_settings()

    def get_orders(self) -> OrdersSummary:
        """Load saved orders; an unreadable store gives an empty summary with an error."""
        try:
            orders = self.service.load_orders()
        except PersistenceError as e:
            logger.error(f"Failed to load orders: {e}")
            return OrdersSummary(error="Could not load your orders")

        return OrdersSummary(
            orders=orders,
            total=compute_total(
                orders,
                delivery_fee=self.settings.delivery_fee,
                discount=self.settings.discount,
            ),
        )

    def format_amount(self, amount: int) -> str:
        return f"{self.settings.currency_symbol}{amount}"
