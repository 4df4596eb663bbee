"""Placeholder screens for the bundled destinations."""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from navdock.modules.router import SessionRouter

PLAYLIST_PREFIX = "library/playlist/"


@dataclass(frozen=True)
class Playlist:
    playlist_id: str
    name: str


SAMPLE_PLAYLISTS: tuple[Playlist, ...] = (
    Playlist("42", "Late night drive"),
    Playlist("7", "Focus"),
    Playlist("13", "Sunday morning"),
)


def playlist_route(playlist: Playlist) -> str:
    return f"{PLAYLIST_PREFIX}{playlist.playlist_id}"


def screen_heading(location: str | None) -> str:
    """Return the heading shown for ``location``."""

    if location is None:
        return "Welcome"
    if location.startswith(PLAYLIST_PREFIX):
        playlist_id = location[len(PLAYLIST_PREFIX) :]
        for playlist in SAMPLE_PLAYLISTS:
            if playlist.playlist_id == playlist_id:
                return playlist.name
        return f"Playlist {playlist_id}"
    return {
        "home": "Home",
        "explore": "Explore",
        "library": "Library",
    }.get(location, "Not found")


def render_screen(router: SessionRouter) -> str:
    """Render the body for the router's current location and return its heading."""

    location = router.current_location
    heading = screen_heading(location)
    st.subheader(heading)

    if location is None:
        st.caption("Pick a destination to get started.")
    elif location == "library":
        for playlist in SAMPLE_PLAYLISTS:
            st.button(
                playlist.name,
                key=f"playlist-{playlist.playlist_id}",
                on_click=router.navigate,
                args=(playlist_route(playlist),),
            )
    elif location.startswith(PLAYLIST_PREFIX):
        st.caption("Tap Library again to return to your playlists.")

    if location is not None:
        reselects = router.reselect_count(location)
        if reselects:
            st.caption(f"Scrolled to top {reselects}×")
    return heading


__all__ = [
    "PLAYLIST_PREFIX",
    "Playlist",
    "SAMPLE_PLAYLISTS",
    "playlist_route",
    "render_screen",
    "screen_heading",
]
