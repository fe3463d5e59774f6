"""
Shopping View - UI for the shopping list screen.

This view handles:
- Displaying items grouped by the day they were added
- Adding items through the add-item form
- Selecting items and deleting the selection
- Showing the total and checking out
"""

import streamlit as st

from controllers.shopping_controller import ORDERS_ROUTE, ShoppingController
from views.components.add_item_form import render_add_item_form
from views.components.shopping_item import render_day_section, render_empty_list
from views.components.shopping_stats import render_shopping_total
from views.notifications import render_notifications

ORDERS_PAGE = "pages/2_📦_My_Orders.py"


class ShoppingView:
    """View for the shopping list UI."""

    def __init__(self):
        self.controller = ShoppingController()

    def render(self):
        """Main render method."""
        self.controller.load()

        self._render_header()

        if self.controller.is_dialog_open():
            render_add_item_form(self.controller)

        items = self.controller.items
        if not items:
            render_empty_list()
        else:
            self._render_items()
            st.markdown("---")
            self._render_checkout()

        render_notifications(self.controller.pop_notifications())

    def _render_header(self):
        """Title row with the add and delete actions."""
        col_title, col_delete, col_add = st.columns([6, 1.5, 1.5], vertical_alignment="center")

        with col_title:
            st.title("ShopSmart")

        with col_delete:
            if self.controller.show_delete_button():
                if st.button("Delete", icon=":material/delete:", help="Delete Selected"):
                    self.controller.delete_selected()
                    st.rerun()

        with col_add:
            if st.button("Add Item", icon=":material/add:", type="primary"):
                self.controller.open_dialog()
                st.rerun()

    def _render_items(self):
        """Items grouped by day."""
        grouped = self.controller.get_items_grouped()

        for section_index, (day, day_items) in enumerate(grouped.items()):
            render_day_section(
                day=day,
                items=day_items,
                key_prefix=str(section_index),
                is_selected=self.controller.is_selected,
                on_toggle=self.controller.toggle_select,
                format_amount=self.controller.format_amount,
            )

    def _render_checkout(self):
        """Total and the checkout button."""
        settings = self.controller.settings
        render_shopping_total(
            subtotal=self.controller.get_subtotal(),
            delivery_fee=settings.delivery_fee,
            discount=settings.discount,
            total=self.controller.get_total(),
            format_amount=self.controller.format_amount,
        )

        if st.button("Checkout", type="primary", use_container_width=True):
            self.controller.checkout()

        if self.controller.pop_navigation() == ORDERS_ROUTE:
            st.switch_page(ORDERS_PAGE)
