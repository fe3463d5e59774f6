"""
Shopping list total component.
"""

import streamlit as st
from typing import Callable


def render_shopping_total(
    subtotal: int,
    delivery_fee: int,
    discount: int,
    total: int,
    format_amount: Callable[[int], str],
):
    """
    Render the order total with its breakdown.

    Args:
        subtotal: Sum of item amounts
        delivery_fee: Delivery fee added to the subtotal
        discount: Discount taken off the subtotal
        total: Amount payable
        format_amount: Formats an amount with the currency symbol
    """
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Subtotal", format_amount(subtotal))
    with col2:
        st.metric("Delivery", format_amount(delivery_fee))
    with col3:
        st.metric("Discount", format_amount(discount))

    st.markdown(f"### Total: {format_amount(total)}")
