"""Primary navigation destinations shown in the bar and the rail."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Destination:
    """One top-level navigation target.

    ``route`` is matched literally against the router's current location,
    ``title_key`` and the two icon identifiers are opaque keys resolved by a
    resource provider at render time.
    """

    route: str
    title_key: str
    icon_active: str
    icon_inactive: str


PRIMARY_DESTINATIONS: tuple[Destination, ...] = (
    Destination("home", "nav.home", "home_active", "home_inactive"),
    Destination("explore", "nav.explore", "explore_active", "explore_inactive"),
    Destination("library", "nav.library", "library_active", "library_inactive"),
)

_DESTINATION_LOOKUP = {destination.route: destination for destination in PRIMARY_DESTINATIONS}


def get_destination(route: str) -> Destination:
    """Return the bundled destination registered under ``route``.

    Raises:
        KeyError: If ``route`` is not one of the primary destinations.
    """

    try:
        return _DESTINATION_LOOKUP[route]
    except KeyError as exc:
        raise KeyError(f"Destination '{route}' is not defined") from exc


def iter_destinations() -> Iterable[Destination]:
    """Yield the bundled destinations in their canonical order."""

    return iter(PRIMARY_DESTINATIONS)


def routes_of(destinations: Iterable[Destination]) -> tuple[str, ...]:
    """Return the routes of ``destinations`` preserving order."""

    return tuple(destination.route for destination in destinations)


def as_sequence(destinations: Iterable[Destination]) -> Sequence[Destination]:
    """Freeze ``destinations`` into a tuple so one render sees one snapshot."""

    if isinstance(destinations, tuple):
        return destinations
    return tuple(destinations)


__all__ = [
    "Destination",
    "PRIMARY_DESTINATIONS",
    "as_sequence",
    "get_destination",
    "iter_destinations",
    "routes_of",
]
