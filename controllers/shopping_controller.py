"""
Shopping Controller - state and commands behind the shopping list screen.

This controller handles:
- Loading the stored list once per session
- Grouping items by the day they were added and computing the total
- The add-item dialog, including the async product image lookup
- Multi-select deletion
- Checkout: saving the list as orders and navigating to the orders page

All screen state lives in one dict under the "shopping" key of the session
state (st.session_state in the app, a plain dict in tests). Views read it
through the getters below and render notifications/navigation requests
that the commands queue.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, MutableMapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import streamlit as st

from config.settings import Settings, get_settings
from models.items import (
    Item,
    compute_subtotal,
    compute_total,
    group_by_day,
    now_millis,
    parse_amount,
)
from models.repositories import PersistenceError
from services.shopping_list_service import ShoppingListService

logger = logging.getLogger(__name__)

ORDERS_ROUTE = "orders"


class ValidationProblem(Enum):
    """Reasons the add-item form was rejected."""
    EMPTY_NAME = "empty_name"
    EMPTY_AMOUNT = "empty_amount"


VALIDATION_MESSAGES = {
    ValidationProblem.EMPTY_NAME: "Please enter a valid name",
    ValidationProblem.EMPTY_AMOUNT: "Please enter a valid amount",
}


@dataclass
class Notification:
    """A short message for the user (shown as a toast)."""
    message: str
    kind: str = "info"  # info, success, error


@dataclass
class AddItemResult:
    """Result of an add-item attempt."""
    success: bool
    item: Optional[Item] = None
    problems: list[ValidationProblem] = field(default_factory=list)
    discarded: bool = False  # dialog was dismissed while the lookup ran


def validate_new_item(name: str, amount_text: str) -> list[ValidationProblem]:
    """Return every problem with the add-item form; empty when valid."""
    problems = []
    if not name or not name.strip():
        problems.append(ValidationProblem.EMPTY_NAME)
    if not amount_text or not amount_text.strip():
        problems.append(ValidationProblem.EMPTY_AMOUNT)
    return problems


def pop_session_notifications(
    state: Optional[MutableMapping[str, Any]] = None,
) -> list[Notification]:
    """
    Return and clear the shopping screen's queued notifications.

    Safe to call from other pages: returns nothing when the shopping
    screen has not been opened in this session.
    """
    state = st.session_state if state is None else state
    shopping = state.get("shopping")
    if not shopping:
        return []
    notifications = shopping["notifications"]
    shopping["notifications"] = []
    return notifications


def _prune_selection(shopping: dict, items: list[Item]):
    """Drop selected items that are no longer in the list."""
    selected = [item for item in shopping["selected_items"] if item in items]
    shopping["selected_items"] = selected
    shopping["show_delete_button"] = bool(selected)


class ShoppingController:
    """Controller for the shopping list screen."""

    def __init__(
        self,
        state: Optional[MutableMapping[str, Any]] = None,
        service: Optional[ShoppingListService] = None,
        settings: Optional[Settings] = None,
    ):
        self._state = st.session_state if state is None else state
        self.settings = settings or get_settings()
        self._init_session_state(service)

    def _init_session_state(self, service: Optional[ShoppingListService]):
        """Initialize session state if not already set."""
        if "shopping" not in self._state:
            shopping = {
                "service": service or ShoppingListService(),
                "loaded": False,
                "selected_items": [],  # Items marked for deletion, by value
                "show_delete_button": False,
                "show_dialog": False,
                "is_loading": False,
                "item_name": "",
                "item_amount": "",
                "dialog_generation": 0,  # Bumped on dismiss to drop stale lookups
                "notifications": [],
                "navigate_to": None,
            }
            shopping["service"].stream.subscribe(
                lambda items: _prune_selection(shopping, items)
            )
            self._state["shopping"] = shopping

    @property
    def _shopping(self) -> dict:
        return self._state["shopping"]

    @property
    def service(self) -> ShoppingListService:
        return self._shopping["service"]

    # ==========================================
    # Loading
    # ==========================================

    def load(self):
        """Load the stored list the first time the screen is shown."""
        if self._shopping["loaded"]:
            return

        try:
            self.service.load_items()
        except PersistenceError as e:
            # An unreadable store shows as an empty list
            logger.error(f"Failed to load shopping list: {e}")
        finally:
            self._shopping["loaded"] = True

    # ==========================================
    # Derived State
    # ==========================================

    @property
    def items(self) -> list[Item]:
        """Current items."""
        return self.service.items

    def display_timezone(self) -> Optional[ZoneInfo]:
        """Configured display timezone, or None for the local timezone."""
        name = self.settings.display_timezone
        if not name:
            return None
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown display timezone '{name}', using local time")
            return None

    def get_items_grouped(self) -> dict[str, list[Item]]:
        """Current items grouped by the day they were added."""
        return group_by_day(self.items, self.display_timezone())

    def get_subtotal(self) -> int:
        return compute_subtotal(self.items)

    def get_total(self, items: Optional[list[Item]] = None) -> int:
        """Subtotal plus delivery fee minus discount."""
        return compute_total(
            self.items if items is None else items,
            delivery_fee=self.settings.delivery_fee,
            discount=self.settings.discount,
        )

    def format_amount(self, amount: int) -> str:
        """Amount with the configured currency symbol, e.g. '₹50'."""
        return f"{self.settings.currency_symbol}{amount}"

    # ==========================================
    # Add Item Dialog
    # ==========================================

    def is_dialog_open(self) -> bool:
        return self._shopping["show_dialog"]

    def is_loading(self) -> bool:
        return self._shopping["is_loading"]

    def get_item_name(self) -> str:
        return self._shopping["item_name"]

    def get_item_amount(self) -> str:
        return self._shopping["item_amount"]

    def set_item_name(self, name: str):
        self._shopping["item_name"] = name

    def set_item_amount(self, amount_text: str):
        self._shopping["item_amount"] = amount_text

    def open_dialog(self):
        """Show the add-item dialog."""
        self._shopping["show_dialog"] = True

    def dismiss_dialog(self):
        """
        Close the add-item dialog.

        Any lookup still running for this dialog will have its result
        discarded when it completes.
        """
        shopping = self._shopping
        shopping["show_dialog"] = False
        shopping["is_loading"] = False
        shopping["item_name"] = ""
        shopping["item_amount"] = ""
        shopping["dialog_generation"] += 1

    async def add_item(
        self,
        name: Optional[str] = None,
        amount_text: Optional[str] = None,
    ) -> AddItemResult:
        """
        Validate the form, look up an image and append a new item.

        Args:
            name: Item name (defaults to the dialog's name field)
            amount_text: Amount as typed (defaults to the dialog's amount field)

        Returns:
            AddItemResult with the new item, the validation problems, or
            discarded=True when the dialog was dismissed mid-lookup
        """
        shopping = self._shopping
        name = shopping["item_name"] if name is None else name
        amount_text = shopping["item_amount"] if amount_text is None else amount_text

        problems = validate_new_item(name, amount_text)
        if problems:
            for problem in problems:
                self._notify(VALIDATION_MESSAGES[problem], "error")
            return AddItemResult(success=False, problems=problems)

        name = name.strip()
        generation = shopping["dialog_generation"]
        shopping["is_loading"] = True
        try:
            image_url = await self.service.search_image(name)
        finally:
            if shopping["dialog_generation"] == generation:
                shopping["is_loading"] = False

        if shopping["dialog_generation"] != generation:
            logger.debug(f"Dialog dismissed during lookup, dropping '{name}'")
            return AddItemResult(success=False, discarded=True)

        item = Item(
            name=name,
            amount=parse_amount(amount_text),
            image_url=image_url,
            date_added=now_millis(),
        )
        updated_items = self.items + [item]
        self.service.update_items(updated_items)
        self._save_items(updated_items)

        shopping["item_name"] = ""
        shopping["item_amount"] = ""
        shopping["show_dialog"] = False
        logger.info(f"Added item '{item.name}' ({item.amount})")
        return AddItemResult(success=True, item=item)

    # ==========================================
    # Selection & Deletion
    # ==========================================

    def get_selected_items(self) -> list[Item]:
        return list(self._shopping["selected_items"])

    def is_selected(self, item: Item) -> bool:
        return item in self._shopping["selected_items"]

    def show_delete_button(self) -> bool:
        return self._shopping["show_delete_button"]

    def toggle_select(self, item: Item, selected: bool):
        """Mark or unmark an item for deletion."""
        shopping = self._shopping
        selection = [s for s in shopping["selected_items"] if s != item]
        if selected and item in self.items:
            selection.append(item)
        shopping["selected_items"] = selection
        shopping["show_delete_button"] = bool(selection)

    def clear_selection(self):
        self._shopping["selected_items"] = []
        self._shopping["show_delete_button"] = False

    def delete_selected(self):
        """Remove every item equal to a selected item and save the list."""
        selected = set(self._shopping["selected_items"])
        if not selected:
            return

        updated_items = [item for item in self.items if item not in selected]
        self.service.update_items(updated_items)
        self._save_items(updated_items)
        self.clear_selection()
        logger.info(f"Deleted {len(selected)} selected item(s)")

    # ==========================================
    # Checkout
    # ==========================================

    def checkout(self) -> bool:
        """
        Save the current list as orders and go to the orders page.

        An empty list clears previous orders. Navigation happens even when
        saving fails. Returns True if the orders were saved.
        """
        orders = [item.to_order() for item in self.items]
        saved = False
        try:
            self.service.save_orders(orders)
            saved = True
            if orders:
                self._notify("Orders saved successfully", "success")
            else:
                logger.info("No orders to save, cleared existing orders")
                self._notify("Cart is empty", "info")
        except PersistenceError:
            logger.exception("Error saving orders")
            self._notify("Error saving orders", "error")

        self._shopping["navigate_to"] = ORDERS_ROUTE
        return saved

    # ==========================================
    # Notifications & Navigation
    # ==========================================

    def pop_notifications(self) -> list[Notification]:
        """Return and clear queued notifications."""
        return pop_session_notifications(self._state)

    def pop_navigation(self) -> Optional[str]:
        """Return and clear the pending navigation route."""
        route = self._shopping["navigate_to"]
        self._shopping["navigate_to"] = None
        return route

    def _notify(self, message: str, kind: str = "info"):
        self._shopping["notifications"].append(Notification(message=message, kind=kind))

    def _save_items(self, items: list[Item]):
        try:
            self.service.save_items(items)
        except PersistenceError:
            logger.exception("Error saving shopping list")
            self._notify("Could not save your list", "error")
