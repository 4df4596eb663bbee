"""End-to-end checks driving the surfaces through Streamlit's AppTest."""

from __future__ import annotations

import pytest

pytest.importorskip("streamlit")

from streamlit.testing.v1 import AppTest


def _bar_demo_app(compact: bool = False) -> None:
    import streamlit as st

    from navdock.modules.destinations import PRIMARY_DESTINATIONS
    from navdock.modules.navigation import render_bar

    st.session_state.setdefault("events", [])
    location = st.session_state.setdefault("location", "library/playlist/42")

    def _record(destination, was_selected) -> None:
        st.session_state["events"].append((destination.route, was_selected))

    render_bar(PRIMARY_DESTINATIONS, location, _record, compact_labels=compact)


def _shell_demo_app() -> None:
    from navdock.modules.settings import NavSettings
    from navdock.modules.shell import render_shell

    render_shell(NavSettings(start_route="home"))


def test_bar_renders_one_button_per_destination() -> None:
    app = AppTest.from_function(_bar_demo_app).run()

    assert not app.exception
    assert [button.label for button in app.button] == [
        ":material/cottage: Home",
        ":material/travel_explore: Explore",
        ":material/library_music: Library",
    ]


def test_compact_bar_buttons_carry_no_label_text() -> None:
    app = AppTest.from_function(_bar_demo_app, kwargs={"compact": True}).run()

    labels = [button.label for button in app.button]
    assert labels == [":material/cottage:", ":material/travel_explore:", ":material/library_music:"]
    assert not any(title in " ".join(labels) for title in ("Home", "Explore", "Library"))


def test_clicks_report_previous_selection() -> None:
    app = AppTest.from_function(_bar_demo_app).run()

    app.button(key="navdock_bar-2").click().run()
    app.button(key="navdock_bar-0").click().run()

    assert app.session_state["events"] == [("library", True), ("home", False)]


def test_shell_navigates_into_nested_screen_and_back() -> None:
    app = AppTest.from_function(_shell_demo_app).run()
    assert app.subheader[0].value == "Home"

    app.button(key="navdock_bar-2").click().run()
    assert app.subheader[0].value == "Library"

    app.button(key="playlist-42").click().run()
    assert app.subheader[0].value == "Late night drive"
    library_button = app.button(key="navdock_bar-2")
    assert library_button.label.endswith("Library")
    assert library_button.label.startswith(":material/library_music:")

    library_button.click().run()
    assert app.subheader[0].value == "Library"

    app.button(key="navdock_bar-2").click().run()
    assert app.subheader[0].value == "Library"
    assert any("Scrolled to top 1" in caption.value for caption in app.caption)


def _rail_demo_app() -> None:
    from navdock.modules.settings import NavSettings
    from navdock.modules.shell import render_shell

    render_shell(NavSettings(nav_layout="rail", start_route="explore", locale="es"))


def test_shell_rail_lives_in_sidebar() -> None:
    app = AppTest.from_function(_rail_demo_app).run()

    assert not app.exception
    assert [button.label for button in app.sidebar.button] == [
        ":material/cottage:",
        ":material/explore:",
        ":material/library_books:",
    ]
    assert app.subheader[0].value == "Explore"

    app.sidebar.button[2].click().run()
    assert app.subheader[0].value == "Library"
