"""Compose the current screen with the configured navigation surface."""

from __future__ import annotations

import streamlit as st

from navdock.modules.destinations import PRIMARY_DESTINATIONS
from navdock.modules.navigation import NavSurface, render_bar, render_rail
from navdock.modules.resources import default_resources
from navdock.modules.router import SessionRouter
from navdock.modules.screens import render_screen
from navdock.modules.settings import NavSettings, load_settings
from navdock.modules.ui_blocks import configure_page


def render_shell(settings: NavSettings | None = None) -> NavSurface:
    """Render one rerun of the app and return the drawn navigation surface."""

    settings = settings or load_settings()
    router = SessionRouter(start_route=settings.start_route)
    resources = default_resources(settings.locale)

    if settings.nav_layout == "rail":
        surface = render_rail(
            PRIMARY_DESTINATIONS,
            router.current_location,
            router.handle_item_click,
            high_contrast_background=settings.pure_black,
            resources=resources,
            theme_mode=settings.theme_mode,
        )
        render_screen(router)
        return surface

    render_screen(router)
    st.divider()
    return render_bar(
        PRIMARY_DESTINATIONS,
        router.current_location,
        router.handle_item_click,
        high_contrast_background=settings.pure_black,
        compact_labels=settings.slim_nav,
        resources=resources,
        theme_mode=settings.theme_mode,
    )


def render_app() -> NavSurface:
    """Configure the page and render the shell."""

    configure_page(page_title="navdock", page_icon=":material/explore:")
    return render_shell()


__all__ = ["render_app", "render_shell"]
