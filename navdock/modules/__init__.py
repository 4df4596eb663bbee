"""Public surface of the navigation modules.

The Streamlit-facing helpers live in their own modules; only the pieces an
embedding app needs are re-exported here.
"""

from __future__ import annotations

from .destinations import PRIMARY_DESTINATIONS, Destination
from .navigation import NavItem, NavSurface, build_bar, build_rail, render_bar, render_rail
from .route_matcher import NavItemState, is_route_selected, nav_item_state, selected_routes

__all__ = [
    "Destination",
    "NavItem",
    "NavItemState",
    "NavSurface",
    "PRIMARY_DESTINATIONS",
    "build_bar",
    "build_rail",
    "is_route_selected",
    "nav_item_state",
    "render_bar",
    "render_rail",
    "selected_routes",
]
