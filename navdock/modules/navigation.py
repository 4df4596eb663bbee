"""Bottom bar and side rail for the primary navigation destinations.

Both surfaces follow the same two steps. ``build_bar``/``build_rail`` turn
the destinations and the router's current location into an immutable
:class:`NavSurface`, evaluating the route matcher once per destination.
``render_bar``/``render_rail`` then draw that description with Streamlit
buttons. A click runs ``on_item_click(destination, was_selected)`` where
``was_selected`` is the selection the item was drawn with, so the router can
tell a re-tap on the active destination from a regular navigation.

The rendered surface is also returned to simplify testing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Literal

import streamlit as st

from navdock.modules.destinations import Destination, as_sequence
from navdock.modules.resources import ResourceProvider, default_resources
from navdock.modules.route_matcher import nav_item_state
from navdock.modules.ui_blocks import inject_css, surface_css
from navdock.modules.visual_theme import NavColors, nav_colors

LOGGER = logging.getLogger(__name__)

SurfaceVariant = Literal["bar", "rail"]
ItemClickHandler = Callable[[Destination, bool], Any]

RAIL_SPACERS = ("leading", "trailing")


@dataclass(frozen=True)
class NavItem:
    """One destination as it will be drawn."""

    key: str
    destination: Destination
    selected: bool
    icon_id: str
    icon: str
    title: str
    label: str | None

    @property
    def button_label(self) -> str:
        if self.label is None:
            return self.icon
        return f"{self.icon} {self.label}"


@dataclass(frozen=True)
class NavSurface:
    """Renderable description of a navigation bar or rail."""

    variant: SurfaceVariant
    key: str
    colors: NavColors
    items: tuple[NavItem, ...]
    spacers: tuple[str, ...] = ()

    @property
    def label_count(self) -> int:
        return sum(1 for item in self.items if item.label is not None)

    @property
    def selected_routes(self) -> tuple[str, ...]:
        return tuple(item.destination.route for item in self.items if item.selected)

    def item_for(self, route: str) -> NavItem:
        for item in self.items:
            if item.destination.route == route:
                return item
        raise KeyError(f"Route '{route}' is not part of this surface")


def _build_items(
    destinations: Iterable[Destination],
    current_location: str | None,
    *,
    key: str,
    show_labels: bool,
    resources: ResourceProvider,
) -> tuple[NavItem, ...]:
    snapshot = as_sequence(destinations)
    items: list[NavItem] = []
    for index, destination in enumerate(snapshot):
        state = nav_item_state(current_location, destination, snapshot)
        title = resources.title(destination.title_key)
        items.append(
            NavItem(
                key=f"{key}-{index}",
                destination=destination,
                selected=state.is_selected,
                icon_id=state.icon_id,
                icon=resources.icon(state.icon_id),
                title=title,
                label=title if show_labels else None,
            )
        )
    return tuple(items)


def build_bar(
    destinations: Iterable[Destination],
    current_location: str | None,
    *,
    high_contrast_background: bool = False,
    compact_labels: bool = False,
    resources: ResourceProvider | None = None,
    theme_mode: str | None = None,
    key: str = "navdock_bar",
) -> NavSurface:
    """Describe a horizontal bar; labels are dropped when ``compact_labels``."""

    items = _build_items(
        destinations,
        current_location,
        key=key,
        show_labels=not compact_labels,
        resources=resources or default_resources(),
    )
    return NavSurface(
        variant="bar",
        key=key,
        colors=nav_colors(theme_mode, high_contrast=high_contrast_background),
        items=items,
    )


def build_rail(
    destinations: Iterable[Destination],
    current_location: str | None,
    *,
    high_contrast_background: bool = False,
    resources: ResourceProvider | None = None,
    theme_mode: str | None = None,
    key: str = "navdock_rail",
) -> NavSurface:
    """Describe a vertical, icon-only rail centred between two spacers."""

    items = _build_items(
        destinations,
        current_location,
        key=key,
        show_labels=False,
        resources=resources or default_resources(),
    )
    return NavSurface(
        variant="rail",
        key=key,
        colors=nav_colors(theme_mode, high_contrast=high_contrast_background),
        items=items,
        spacers=RAIL_SPACERS,
    )


def _draw_button(target: Any, item: NavItem, on_item_click: ItemClickHandler) -> bool:
    return target.button(
        item.button_label,
        key=item.key,
        help=item.title,
        on_click=on_item_click,
        args=(item.destination, item.selected),
        type="primary" if item.selected else "secondary",
    )


def _spacer_markup(surface: NavSurface, position: str) -> str:
    return (
        f"<div class='navdock-rail__spacer' data-navdock-surface='{surface.key}' "
        f"data-navdock-spacer='{position}'></div>"
    )


def draw_surface(surface: NavSurface, on_item_click: ItemClickHandler, *, container: Any | None = None) -> None:
    """Draw an already built surface with Streamlit widgets."""

    inject_css(surface_css(surface), slot=surface.key)
    target = container if container is not None else st
    box = target.container(key=surface.key)

    if surface.variant == "bar":
        if not surface.items:
            return
        columns = box.columns(len(surface.items), gap="small")
        for column, item in zip(columns, surface.items):
            _draw_button(column, item, on_item_click)
        return

    leading, trailing = surface.spacers
    box.markdown(_spacer_markup(surface, leading), unsafe_allow_html=True)
    for item in surface.items:
        _draw_button(box, item, on_item_click)
    box.markdown(_spacer_markup(surface, trailing), unsafe_allow_html=True)


def render_bar(
    destinations: Iterable[Destination],
    current_location: str | None,
    on_item_click: ItemClickHandler,
    *,
    high_contrast_background: bool = False,
    compact_labels: bool = False,
    resources: ResourceProvider | None = None,
    theme_mode: str | None = None,
    key: str = "navdock_bar",
    render: bool = True,
) -> NavSurface:
    """Render the bottom navigation bar and return its description."""

    surface = build_bar(
        destinations,
        current_location,
        high_contrast_background=high_contrast_background,
        compact_labels=compact_labels,
        resources=resources,
        theme_mode=theme_mode,
        key=key,
    )
    LOGGER.debug(
        "Bar %s at %r: selected=%s compact=%s",
        key,
        current_location,
        surface.selected_routes,
        compact_labels,
    )
    if render:
        draw_surface(surface, on_item_click)
    return surface


def render_rail(
    destinations: Iterable[Destination],
    current_location: str | None,
    on_item_click: ItemClickHandler,
    *,
    high_contrast_background: bool = False,
    resources: ResourceProvider | None = None,
    theme_mode: str | None = None,
    key: str = "navdock_rail",
    container: Any | None = None,
    render: bool = True,
) -> NavSurface:
    """Render the side rail, by default into ``st.sidebar``, and return it."""

    surface = build_rail(
        destinations,
        current_location,
        high_contrast_background=high_contrast_background,
        resources=resources,
        theme_mode=theme_mode,
        key=key,
    )
    LOGGER.debug("Rail %s at %r: selected=%s", key, current_location, surface.selected_routes)
    if render:
        draw_surface(surface, on_item_click, container=container if container is not None else st.sidebar)
    return surface


__all__ = [
    "ItemClickHandler",
    "NavItem",
    "NavSurface",
    "build_bar",
    "build_rail",
    "draw_surface",
    "render_bar",
    "render_rail",
]
