"""
Orders View - the list as it was saved at the last checkout.
"""

import streamlit as st

from controllers.orders_controller import OrdersController
from controllers.shopping_controller import pop_session_notifications
from views.notifications import render_notifications

SHOPPING_PAGE = "pages/1_🛒_Shopping_List.py"


class OrdersView:
    """View for the My Orders page."""

    def __init__(self):
        self.controller = OrdersController()

    def render(self):
        """Main render method."""
        st.title("My Orders")

        # Checkout toasts are queued on the shopping screen before it navigates here
        render_notifications(pop_session_notifications())

        summary = self.controller.get_orders()
        if summary.error:
            st.error(summary.error)
        elif not summary.orders:
            st.info("No orders yet.")
        else:
            for index, order in enumerate(summary.orders):
                with st.container(border=True):
                    col_image, col_item = st.columns([1, 6], vertical_alignment="center")
                    with col_image:
                        if order.image_url:
                            st.image(order.image_url, width=70)
                    with col_item:
                        st.markdown(f"**{order.name}**")
                        st.caption(self.controller.format_amount(order.amount))

            st.markdown(f"### Total: {self.controller.format_amount(summary.total)}")

        if st.button("Back to Shopping List"):
            st.switch_page(SHOPPING_PAGE)
