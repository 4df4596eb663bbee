"""Colour palettes for the navigation bar and rail.

Each mode carries the handful of Material-style roles the surfaces need: the
container behind the items, the muted content colour used for unselected
items, and the primary accent used for the selected item and, at reduced
opacity, for its indicator pill. The high-contrast variant swaps the
container for a pure black/white pair regardless of mode.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

ThemeMode = Literal["light", "dark"]

_DEFAULT_MODE: ThemeMode = "dark"
INDICATOR_ALPHA = 0.4
HIGH_CONTRAST_CONTAINER = "#000000"
HIGH_CONTRAST_CONTENT = "#FFFFFF"
FONT_STACK = "'Source Sans 3', 'Segoe UI', sans-serif"


@dataclass(frozen=True)
class Palette:
    """Colour roles shared by the navigation surfaces."""

    background: str
    surface_container: str
    on_surface_variant: str
    primary: str
    text: str


@dataclass(frozen=True)
class NavColors:
    """Resolved colours for one rendered surface."""

    container: str
    content: str
    selected: str
    unselected: str
    indicator: str


_PALETTES: Dict[ThemeMode, Palette] = {
    "light": Palette(
        background="#F5F7FA",
        surface_container="#E9EDF4",
        on_surface_variant="#465164",
        primary="#0B3D91",
        text="#0B1526",
    ),
    "dark": Palette(
        background="#050A14",
        surface_container="#1C2840",
        on_surface_variant="#9AA5BF",
        primary="#5A8DEE",
        text="#F8FAFC",
    ),
}


def resolve_mode(mode: str | None = None) -> ThemeMode:
    """Return a supported mode, defaulting to dark when ``mode`` is ``None``.

    Raises:
        ValueError: If ``mode`` names an unknown palette.
    """

    candidate = (mode or _DEFAULT_MODE).lower()
    if candidate not in _PALETTES:
        raise ValueError(f"Unsupported theme mode: {mode!r}")
    return candidate  # type: ignore[return-value]


def get_palette(mode: str | None = None) -> Palette:
    return _PALETTES[resolve_mode(mode)]


def with_alpha(hex_color: str, alpha: float) -> str:
    """Convert ``#RRGGBB`` into an ``rgba()`` string with ``alpha`` opacity."""

    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB colour, got {hex_color!r}")
    red, green, blue = (int(value[index : index + 2], 16) for index in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha:g})"


def nav_colors(mode: str | None = None, *, high_contrast: bool = False) -> NavColors:
    """Derive the colours a bar or rail uses in ``mode``."""

    palette = get_palette(mode)
    if high_contrast:
        container = HIGH_CONTRAST_CONTAINER
        content = HIGH_CONTRAST_CONTENT
    else:
        container = palette.surface_container
        content = palette.on_surface_variant
    return NavColors(
        container=container,
        content=content,
        selected=palette.primary,
        unselected=palette.on_surface_variant,
        indicator=with_alpha(palette.primary, INDICATOR_ALPHA),
    )


def palette_tokens(mode: str | None = None) -> Dict[str, str]:
    """Expose the palette of ``mode`` as CSS custom properties."""

    resolved = resolve_mode(mode)
    palette = _PALETTES[resolved]
    colors = nav_colors(resolved)
    return {
        "navdock-color-background": palette.background,
        "navdock-color-surface-container": palette.surface_container,
        "navdock-color-on-surface-variant": palette.on_surface_variant,
        "navdock-color-primary": palette.primary,
        "navdock-color-text": palette.text,
        "navdock-color-indicator": colors.indicator,
        "navdock-color-high-contrast-container": HIGH_CONTRAST_CONTAINER,
        "navdock-color-high-contrast-content": HIGH_CONTRAST_CONTENT,
        "navdock-font-stack": FONT_STACK,
    }


def available_modes() -> tuple[ThemeMode, ...]:
    return tuple(_PALETTES)


__all__ = [
    "INDICATOR_ALPHA",
    "NavColors",
    "Palette",
    "ThemeMode",
    "available_modes",
    "get_palette",
    "nav_colors",
    "palette_tokens",
    "resolve_mode",
    "with_alpha",
]
