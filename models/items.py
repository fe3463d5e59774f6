"""
Shopping list domain models.

Items are plain frozen dataclasses: two items with the same name, amount,
image and timestamp are the same item as far as selection and deletion
are concerned.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import Iterable, Optional, Union


def now_millis() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Item:
    """A single shopping list entry."""
    name: str
    amount: int = 0
    image_url: Optional[str] = None
    date_added: int = field(default_factory=now_millis)  # ms since epoch

    def to_order(self) -> "OrderRecord":
        """The subset of fields kept when the list is checked out."""
        return OrderRecord(name=self.name, amount=self.amount, image_url=self.image_url)


@dataclass(frozen=True)
class OrderRecord:
    """An item as saved to the orders store at checkout."""
    name: str
    amount: int
    image_url: Optional[str] = None


MAX_AMOUNT = 2**31 - 1


def parse_amount(text: str) -> int:
    """
    Parse user-entered amount text.

    Anything that is not a plain integer between 0 and MAX_AMOUNT becomes 0.
    """
    try:
        value = int(text.strip())
    except (ValueError, AttributeError):
        return 0
    return value if 0 <= value <= MAX_AMOUNT else 0


def day_label(date_added: int, tz: Optional[tzinfo] = None) -> str:
    """
    Format a millisecond timestamp as a calendar-day heading.

    Example: "Monday, 19 October 2026". Uses the local timezone when tz
    is None.
    """
    moment = datetime.fromtimestamp(date_added / 1000, tz=tz)
    return f"{moment:%A}, {moment.day} {moment:%B %Y}"


def group_by_day(items: Iterable[Item], tz: Optional[tzinfo] = None) -> dict[str, list[Item]]:
    """
    Group items by the day they were added.

    Groups keep first-occurrence order and items keep their list order
    within a group.
    """
    grouped: dict[str, list[Item]] = {}
    for item in items:
        grouped.setdefault(day_label(item.date_added, tz), []).append(item)
    return grouped


Priced = Union["Item", "OrderRecord"]


def compute_subtotal(items: Iterable[Priced]) -> int:
    """Sum of item (or order record) amounts."""
    return sum(item.amount for item in items)


def compute_total(items: Iterable[Priced], delivery_fee: int = 0, discount: int = 0) -> int:
    """Subtotal plus delivery fee minus discount."""
    return compute_subtotal(items) + delivery_fee - discount
