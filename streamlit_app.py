"""
ShopSmart - Home Page

A shopping list that groups items by the day you added them and saves
your cart as an order at checkout.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="ShopSmart",
    page_icon="🛒",
    layout="centered"
)

from config import configure_logging, init_db

configure_logging()
init_db()

st.title("🛒 ShopSmart")
st.markdown("Your shopping list, grouped by day")

st.markdown("---")

col1, col2 = st.columns(2)

with col1:
    st.markdown("### 🛒 Shopping List")
    st.markdown("""
    - Add items with a product picture
    - See what you added each day
    - Select and delete items
    - Check out your cart
    """)
    if st.button("Open List →", type="primary", use_container_width=True):
        st.switch_page("pages/1_🛒_Shopping_List.py")

with col2:
    st.markdown("### 📦 My Orders")
    st.markdown("""
    - Review your last checkout
    - See the order total
    """)
    if st.button("View Orders →", type="primary", use_container_width=True):
        st.switch_page("pages/2_📦_My_Orders.py")

st.markdown("---")
st.markdown("*Use the sidebar to navigate between pages.*")
