"""
Reusable UI components.
"""

from views.components.add_item_form import render_add_item_form
from views.components.shopping_item import (
    render_day_section,
    render_empty_list,
    render_shopping_item_row,
)
from views.components.shopping_stats import render_shopping_total

__all__ = [
    "render_add_item_form",
    "render_day_section",
    "render_empty_list",
    "render_shopping_item_row",
    "render_shopping_total",
]
