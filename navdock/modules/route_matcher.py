"""Decide which navigation destination is active for a router location.

A destination is selected when the current location equals its route, or
when the location is a nested screen beneath it (``"<route>/..."``) and the
route belongs to the configured destinations. The separator is mandatory so
``"libraryExtra"`` never activates ``"library"``. Routes are compared as
plain strings and never parsed as paths.

Two destinations whose routes are ``/``-prefixes of each other can both be
selected for the same location; callers render both as active.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from navdock.modules.destinations import Destination, as_sequence, routes_of

_SELECTION_CACHE_SIZE = 512


@dataclass(frozen=True)
class NavItemState:
    """Selection flag together with the icon id it implies."""

    is_selected: bool
    icon_id: str


@lru_cache(maxsize=_SELECTION_CACHE_SIZE)
def _matches(current_location: str | None, destination_route: str, routes: tuple[str, ...]) -> bool:
    if current_location is None:
        return False
    if current_location == destination_route:
        return True
    return destination_route in routes and current_location.startswith(f"{destination_route}/")


def is_route_selected(
    current_location: str | None,
    destination_route: str,
    destinations: Iterable[Destination],
) -> bool:
    """Return ``True`` when ``destination_route`` is active for ``current_location``."""

    return _matches(current_location, destination_route, routes_of(destinations))


def nav_item_state(
    current_location: str | None,
    destination: Destination,
    destinations: Iterable[Destination],
) -> NavItemState:
    selected = is_route_selected(current_location, destination.route, destinations)
    icon_id = destination.icon_active if selected else destination.icon_inactive
    return NavItemState(is_selected=selected, icon_id=icon_id)


def selected_routes(
    current_location: str | None,
    destinations: Iterable[Destination],
) -> tuple[str, ...]:
    """Return every route reported as selected, in destination order."""

    snapshot = as_sequence(destinations)
    return tuple(
        destination.route
        for destination in snapshot
        if is_route_selected(current_location, destination.route, snapshot)
    )


def clear_selection_cache() -> None:
    """Drop memoized selection results."""

    _matches.cache_clear()


__all__ = [
    "NavItemState",
    "clear_selection_cache",
    "is_route_selected",
    "nav_item_state",
    "selected_routes",
]
