"""Session-backed router consumed by the navigation surfaces.

The router owns ``current_location`` and receives the
``(destination, was_selected)`` clicks emitted by the bar and the rail:

* a click on an unselected destination navigates to its route;
* a click on the selected destination while a nested screen is open
  (``"library/playlist/42"``) pops back to the destination root;
* a click on the selected destination at its root is recorded as a
  scroll-to-top request that screens can react to.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

import streamlit as st

from navdock.modules.destinations import Destination

LOGGER = logging.getLogger(__name__)

_DEFAULT_STATE_KEY = "navdock_router"


class SessionRouter:
    """Keep the current location inside ``st.session_state``."""

    def __init__(
        self,
        *,
        start_route: str | None = None,
        state_key: str = _DEFAULT_STATE_KEY,
        session_state: MutableMapping[str, Any] | None = None,
    ) -> None:
        self._state_key = state_key
        self._session_state = session_state
        store = self._store()
        store.setdefault("location", start_route)
        store.setdefault("reselects", {})

    def _store(self) -> MutableMapping[str, Any]:
        session = self._session_state if self._session_state is not None else st.session_state
        if self._state_key not in session:
            session[self._state_key] = {}
        return session[self._state_key]

    @property
    def current_location(self) -> str | None:
        return self._store()["location"]

    def navigate(self, location: str) -> None:
        store = self._store()
        previous = store["location"]
        store["location"] = location
        LOGGER.info("Navigated from %r to %r", previous, location)

    def reselect_count(self, route: str) -> int:
        """Number of scroll-to-top requests recorded for ``route``."""

        return int(self._store()["reselects"].get(route, 0))

    def handle_item_click(self, destination: Destination, was_selected: bool) -> None:
        """React to a bar or rail click."""

        if not was_selected:
            self.navigate(destination.route)
            return

        if self.current_location != destination.route:
            LOGGER.info("Re-tap on %r pops back to its root", destination.route)
            self.navigate(destination.route)
            return

        reselects = self._store()["reselects"]
        reselects[destination.route] = reselects.get(destination.route, 0) + 1
        LOGGER.info("Re-tap on %r requests scroll to top", destination.route)


__all__ = ["SessionRouter"]
