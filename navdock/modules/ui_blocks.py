from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Any, Literal, Mapping

import streamlit as st

from navdock.modules.visual_theme import FONT_STACK

if TYPE_CHECKING:
    from navdock.modules.navigation import NavItem, NavSurface

_CSS_HASH_PREFIX = "__navdock_css_hash__"

_ELLIPSIS_RULES = "white-space: nowrap; overflow: hidden; text-overflow: ellipsis; max-width: 100%;"


def configure_page(
    *,
    page_title: str,
    page_icon: str | None = None,
    layout: Literal["centered", "wide"] = "centered",
    initial_sidebar_state: Literal["auto", "expanded", "collapsed"] = "auto",
    menu_items: Mapping[str, str] | None = None,
) -> None:
    """Apply the shared Streamlit page configuration."""

    page_config: dict[str, Any] = {
        "page_title": page_title,
        "page_icon": page_icon,
        "layout": layout,
        "initial_sidebar_state": initial_sidebar_state,
        "menu_items": menu_items,
    }
    st.set_page_config(**page_config)


def css_hash_key(slot: str) -> str:
    return f"{_CSS_HASH_PREFIX}{slot}"


def inject_css(css: str, *, slot: str) -> str | None:
    """Emit ``css`` as a ``<style>`` block and remember its hash for ``slot``.

    Streamlit discards markup between reruns, so the block is written on every
    call; the stored hash lets callers tell whether the stylesheet changed.
    """

    if not css:
        return None

    css_hash = hashlib.sha256(css.encode("utf-8")).hexdigest()
    st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
    st.session_state[css_hash_key(slot)] = css_hash
    return css_hash


def _item_css(surface: NavSurface, item: NavItem) -> list[str]:
    colors = surface.colors
    selector = f".st-key-{item.key} button"
    if item.selected:
        rules = [
            f"{selector} {{ color: {colors.selected}; background-color: {colors.indicator}; "
            "border: none; border-radius: 999px; }",
        ]
    else:
        rules = [
            f"{selector} {{ color: {colors.unselected}; background-color: transparent; "
            "border: none; border-radius: 999px; }",
        ]
    if item.label is not None:
        rules.append(f"{selector} p {{ {_ELLIPSIS_RULES} }}")
    return rules


def surface_css(surface: NavSurface) -> str:
    """Return the scoped stylesheet for a built bar or rail."""

    colors = surface.colors
    container = f".st-key-{surface.key}"
    rules = [
        f"{container} {{ background-color: {colors.container}; color: {colors.content}; "
        f"font-family: {FONT_STACK}; border-radius: 1rem; padding: 0.5rem; }}",
    ]
    if surface.variant == "rail":
        rules.append(
            f"{container} {{ display: flex; flex-direction: column; align-items: center; "
            "min-height: 80vh; }"
        )
        rules.append(
            f".navdock-rail__spacer[data-navdock-surface='{surface.key}'] "
            "{ flex: 1 1 0; min-height: 20vh; }"
        )
    for item in surface.items:
        rules.extend(_item_css(surface, item))
    return "\n".join(rules)


__all__ = [
    "configure_page",
    "css_hash_key",
    "inject_css",
    "surface_css",
]
