"""
Toast rendering for controller notifications.
"""

import streamlit as st

TOAST_ICONS = {
    "success": ":material/check_circle:",
    "error": ":material/error:",
    "info": ":material/info:",
}


def render_notifications(notifications):
    """Show each queued notification as a toast."""
    for notification in notifications:
        st.toast(notification.message, icon=TOAST_ICONS.get(notification.kind))
