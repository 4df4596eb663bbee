"""Environment-driven preferences for the navigation surfaces."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal

LOGGER = logging.getLogger(__name__)

NavLayout = Literal["bar", "rail"]

_ENV_THEME_MODE = "NAVDOCK_THEME_MODE"
_ENV_PURE_BLACK = "NAVDOCK_PURE_BLACK"
_ENV_SLIM_NAV = "NAVDOCK_SLIM_NAV"
_ENV_NAV_LAYOUT = "NAVDOCK_NAV_LAYOUT"
_ENV_LOCALE = "NAVDOCK_LOCALE"
_ENV_START_ROUTE = "NAVDOCK_START_ROUTE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

THEME_MODES = ("light", "dark")
NAV_LAYOUTS: tuple[NavLayout, ...] = ("bar", "rail")
SUPPORTED_LOCALES = ("en", "es")


@dataclass(frozen=True)
class NavSettings:
    """Resolved user preferences for one app session."""

    theme_mode: str = "dark"
    pure_black: bool = False
    slim_nav: bool = False
    nav_layout: NavLayout = "bar"
    locale: str = "en"
    start_route: str | None = None


def _raw_from_env(var_name: str) -> str | None:
    """Return the stripped value of ``var_name`` or ``None`` when unset/blank."""

    raw_value = os.environ.get(var_name)
    if raw_value is None:
        return None

    stripped = raw_value.strip()
    return stripped or None


def _flag_from_env(var_name: str, default: bool) -> bool:
    raw_value = _raw_from_env(var_name)
    if raw_value is None:
        return default

    lowered = raw_value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False

    LOGGER.warning("Ignoring %s=%r; expected a boolean flag", var_name, raw_value)
    return default


def _choice_from_env(var_name: str, choices: tuple[str, ...], default: str) -> str:
    raw_value = _raw_from_env(var_name)
    if raw_value is None:
        return default

    lowered = raw_value.lower()
    if lowered in choices:
        return lowered

    LOGGER.warning(
        "Ignoring %s=%r; expected one of %s", var_name, raw_value, ", ".join(choices)
    )
    return default


def load_settings() -> NavSettings:
    """Read the ``NAVDOCK_*`` environment variables into :class:`NavSettings`."""

    defaults = NavSettings()
    return NavSettings(
        theme_mode=_choice_from_env(_ENV_THEME_MODE, THEME_MODES, defaults.theme_mode),
        pure_black=_flag_from_env(_ENV_PURE_BLACK, defaults.pure_black),
        slim_nav=_flag_from_env(_ENV_SLIM_NAV, defaults.slim_nav),
        nav_layout=_choice_from_env(_ENV_NAV_LAYOUT, NAV_LAYOUTS, defaults.nav_layout),  # type: ignore[arg-type]
        locale=_choice_from_env(_ENV_LOCALE, SUPPORTED_LOCALES, defaults.locale),
        start_route=_raw_from_env(_ENV_START_ROUTE),
    )


__all__ = [
    "NAV_LAYOUTS",
    "NavLayout",
    "NavSettings",
    "SUPPORTED_LOCALES",
    "THEME_MODES",
    "load_settings",
]
