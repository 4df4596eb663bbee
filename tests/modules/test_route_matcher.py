from __future__ import annotations

import pytest

from navdock.modules.destinations import PRIMARY_DESTINATIONS, Destination
from navdock.modules import route_matcher


def _dest(route: str) -> Destination:
    return Destination(route, f"nav.{route}", f"{route}_active", f"{route}_inactive")


HOME = _dest("home")
LIBRARY = _dest("library")
DESTINATIONS = (HOME, LIBRARY)


@pytest.mark.parametrize("destination", PRIMARY_DESTINATIONS)
def test_missing_location_selects_nothing(destination: Destination) -> None:
    assert route_matcher.is_route_selected(None, destination.route, PRIMARY_DESTINATIONS) is False


@pytest.mark.parametrize("destination", PRIMARY_DESTINATIONS)
def test_exact_location_selects_destination(destination: Destination) -> None:
    assert (
        route_matcher.is_route_selected(destination.route, destination.route, PRIMARY_DESTINATIONS)
        is True
    )


def test_nested_location_keeps_parent_selected() -> None:
    location = "library/playlist/42"

    assert route_matcher.is_route_selected(location, "library", DESTINATIONS) is True
    assert route_matcher.is_route_selected(location, "home", DESTINATIONS) is False


def test_prefix_without_separator_is_not_a_match() -> None:
    assert route_matcher.is_route_selected("libraryExtra", "library", DESTINATIONS) is False


def test_prefix_rule_requires_route_to_be_configured() -> None:
    assert route_matcher.is_route_selected("settings/account", "settings", DESTINATIONS) is False
    assert route_matcher.is_route_selected("settings", "settings", DESTINATIONS) is True


def test_empty_route_is_matched_literally() -> None:
    root = _dest("")
    destinations = (root, HOME)

    assert route_matcher.is_route_selected("", "", destinations) is True
    assert route_matcher.is_route_selected("/about", "", destinations) is True
    assert route_matcher.is_route_selected("home", "", destinations) is False


def test_routes_with_slashes_are_compared_as_strings() -> None:
    nested = _dest("library/albums")
    destinations = (HOME, nested)

    assert route_matcher.is_route_selected("library/albums/9", "library/albums", destinations) is True
    assert route_matcher.is_route_selected("library", "library/albums", destinations) is False


def test_prefix_related_routes_can_both_be_selected() -> None:
    albums = _dest("library/albums")
    destinations = (LIBRARY, albums)

    assert route_matcher.selected_routes("library/albums/9", destinations) == (
        "library",
        "library/albums",
    )


def test_repeated_evaluation_is_stable() -> None:
    results = {
        route_matcher.is_route_selected("library/playlist/42", "library", DESTINATIONS)
        for _ in range(5)
    }
    assert results == {True}

    route_matcher.clear_selection_cache()
    assert route_matcher.is_route_selected("library/playlist/42", "library", DESTINATIONS) is True


def test_destination_list_is_part_of_the_cache_key() -> None:
    assert route_matcher.is_route_selected("library/x", "library", DESTINATIONS) is True
    assert route_matcher.is_route_selected("library/x", "library", (HOME,)) is False


def test_nav_item_state_picks_icon_for_selection() -> None:
    selected = route_matcher.nav_item_state("library/playlist/1", LIBRARY, DESTINATIONS)
    unselected = route_matcher.nav_item_state("library/playlist/1", HOME, DESTINATIONS)

    assert selected == route_matcher.NavItemState(is_selected=True, icon_id="library_active")
    assert unselected == route_matcher.NavItemState(is_selected=False, icon_id="home_inactive")


def test_selected_routes_accepts_generators() -> None:
    assert route_matcher.selected_routes("home", (d for d in DESTINATIONS)) == ("home",)
    assert route_matcher.selected_routes(None, DESTINATIONS) == ()
