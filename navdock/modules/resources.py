"""Localized labels and icon glyphs for navigation destinations.

The surfaces treat resources as opaque lookups: they ask a provider for the
text behind a ``title_key`` and the glyph behind an icon id and render
whatever comes back. A missing entry raises :class:`ResourceNotFoundError`
from the provider and is not caught by the navigation code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol

DEFAULT_LOCALE = "en"

STRINGS: Mapping[str, Mapping[str, str]] = {
    "en": {
        "nav.home": "Home",
        "nav.explore": "Explore",
        "nav.library": "Library",
    },
    "es": {
        "nav.home": "Inicio",
        "nav.explore": "Explorar",
        "nav.library": "Biblioteca",
    },
}

# Streamlit renders ``:material/<name>:`` shortcodes as Material Symbols.
ICONS: Mapping[str, str] = {
    "home_active": ":material/home:",
    "home_inactive": ":material/cottage:",
    "explore_active": ":material/explore:",
    "explore_inactive": ":material/travel_explore:",
    "library_active": ":material/library_music:",
    "library_inactive": ":material/library_books:",
}


class ResourceNotFoundError(KeyError):
    """Raised when a provider has no entry for a requested key."""


class ResourceProvider(Protocol):
    def title(self, title_key: str) -> str: ...

    def icon(self, icon_id: str) -> str: ...


@dataclass(frozen=True)
class CatalogResources:
    """Dictionary-backed provider for one locale."""

    locale: str = DEFAULT_LOCALE
    strings: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: STRINGS)
    icons: Mapping[str, str] = field(default_factory=lambda: ICONS)

    def title(self, title_key: str) -> str:
        table = self.strings.get(self.locale)
        if table is None:
            raise ResourceNotFoundError(f"No strings registered for locale '{self.locale}'")
        try:
            return table[title_key]
        except KeyError as exc:
            raise ResourceNotFoundError(
                f"String '{title_key}' is not defined for locale '{self.locale}'"
            ) from exc

    def icon(self, icon_id: str) -> str:
        try:
            return self.icons[icon_id]
        except KeyError as exc:
            raise ResourceNotFoundError(f"Icon '{icon_id}' is not defined") from exc


def default_resources(locale: str | None = None) -> CatalogResources:
    return CatalogResources(locale=locale or DEFAULT_LOCALE)


__all__ = [
    "CatalogResources",
    "DEFAULT_LOCALE",
    "ICONS",
    "ResourceNotFoundError",
    "ResourceProvider",
    "STRINGS",
    "default_resources",
]
