"""
Add-item form component.
"""

import asyncio

import streamlit as st

from controllers.shopping_controller import ShoppingController


def render_add_item_form(controller: ShoppingController):
    """
    Render the add-item panel while the dialog is open.

    The image lookup runs to completion inside this script run, under a
    spinner; Cancel discards the form.
    """
    with st.container(border=True):
        st.markdown("#### Add New Item")

        name = st.text_input("Item Name", key="add_item_name")
        amount = st.text_input("Amount", key="add_item_amount")
        controller.set_item_name(name)
        controller.set_item_amount(amount)

        col_cancel, col_add = st.columns(2)

        with col_cancel:
            if st.button("Cancel", use_container_width=True):
                controller.dismiss_dialog()
                _clear_form_widgets()
                st.rerun()

        with col_add:
            if st.button("Add", type="primary", use_container_width=True):
                with st.spinner("Looking up a picture..."):
                    result = asyncio.run(controller.add_item(name, amount))
                if result.success:
                    _clear_form_widgets()
                    st.rerun()


def _clear_form_widgets():
    """Forget the text inputs so the next dialog starts empty."""
    for key in ("add_item_name", "add_item_amount"):
        st.session_state.pop(key, None)
