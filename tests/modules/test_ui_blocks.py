from __future__ import annotations

import hashlib
from types import SimpleNamespace

from navdock.modules import navigation, ui_blocks
from navdock.modules.destinations import PRIMARY_DESTINATIONS


def test_configure_page_applies_defaults(monkeypatch) -> None:
    captured: dict[str, object] = {}

    monkeypatch.setattr(
        ui_blocks,
        "st",
        SimpleNamespace(set_page_config=lambda **kwargs: captured.update(kwargs)),
    )

    ui_blocks.configure_page(page_title="Demo", page_icon=":material/explore:")

    assert captured["page_title"] == "Demo"
    assert captured["page_icon"] == ":material/explore:"
    assert captured["layout"] == "centered"
    assert captured["initial_sidebar_state"] == "auto"


def test_inject_css_records_hash(monkeypatch) -> None:
    rendered: list[str] = []
    state: dict[str, str] = {}
    monkeypatch.setattr(
        ui_blocks,
        "st",
        SimpleNamespace(
            markdown=lambda body, unsafe_allow_html=False: rendered.append(body),
            session_state=state,
        ),
    )

    css_hash = ui_blocks.inject_css(".x { color: red; }", slot="bar")

    assert rendered == ["<style>.x { color: red; }</style>"]
    assert css_hash == hashlib.sha256(b".x { color: red; }").hexdigest()
    assert state[ui_blocks.css_hash_key("bar")] == css_hash
    assert ui_blocks.inject_css("", slot="bar") is None
    assert len(rendered) == 1


def test_surface_css_highlights_selected_item() -> None:
    surface = navigation.build_bar(PRIMARY_DESTINATIONS, "explore", key="bottom")

    css = ui_blocks.surface_css(surface)

    selected = f".st-key-bottom-1 button {{ color: {surface.colors.selected}; background-color: {surface.colors.indicator};"
    unselected = f".st-key-bottom-0 button {{ color: {surface.colors.unselected}; background-color: transparent;"
    assert selected in css
    assert unselected in css
    assert ".st-key-bottom-0 button p" in css


def test_compact_and_rail_css_skip_ellipsis_rules() -> None:
    compact = navigation.build_bar(PRIMARY_DESTINATIONS, "home", compact_labels=True)
    rail = navigation.build_rail(PRIMARY_DESTINATIONS, "home")

    assert "text-overflow" not in ui_blocks.surface_css(compact)
    rail_css = ui_blocks.surface_css(rail)
    assert "text-overflow" not in rail_css
    assert "flex-direction: column" in rail_css
    assert ".navdock-rail__spacer[data-navdock-surface='navdock_rail']" in rail_css
