"""
Shopping list item components.

Renders the day headings and item rows of the shopping list.
"""

import streamlit as st
from typing import Callable

from models.items import Item


def render_shopping_item_row(
    item: Item,
    key: str,
    is_selected: bool,
    on_toggle: Callable[[Item, bool], None],
    format_amount: Callable[[int], str],
):
    """
    Render one item: image, name, amount and a selection checkbox.

    Args:
        item: The shopping list item
        key: Unique widget key (equal items can appear more than once)
        is_selected: Whether the item is marked for deletion
        on_toggle: Callback when the checkbox changes
        format_amount: Formats an amount with the currency symbol
    """
    with st.container(border=True):
        col_image, col_item, col_check = st.columns([1, 5, 0.6], vertical_alignment="center")

        with col_image:
            if item.image_url:
                st.image(item.image_url, width=70)

        with col_item:
            st.markdown(f"**{item.name}**")
            st.caption(format_amount(item.amount))

        with col_check:
            checked = st.checkbox(
                "selected",
                value=is_selected,
                key=f"select_{key}",
                label_visibility="collapsed"
            )
            if checked != is_selected:
                on_toggle(item, checked)
                st.rerun()


def render_day_section(
    day: str,
    items: list[Item],
    key_prefix: str,
    is_selected: Callable[[Item], bool],
    on_toggle: Callable[[Item, bool], None],
    format_amount: Callable[[int], str],
):
    """
    Render a day heading followed by the items added that day.

    Args:
        day: Day label (e.g., "Monday, 19 October 2026")
        items: Items added on that day, in list order
        key_prefix: Prefix keeping widget keys unique across sections
        is_selected: Returns whether an item is selected
        on_toggle: Callback when an item's checkbox changes
        format_amount: Formats an amount with the currency symbol
    """
    st.markdown(f"### {day}")

    for index, item in enumerate(items):
        render_shopping_item_row(
            item=item,
            key=f"{key_prefix}_{index}",
            is_selected=is_selected(item),
            on_toggle=on_toggle,
            format_amount=format_amount,
        )


def render_empty_list():
    """Render the empty shopping list message."""
    st.markdown("#### Your shopping list is empty.")
    st.caption("Add items using the '+ Add Item' button.")
