"""Unit tests for the search session controller and its view projections."""
import asyncio
from unittest.mock import MagicMock

import pytest

from foodfinder.errors import SearchError, SearchErrorKind
from foodfinder.models.place import Coordinates, Place, PriceLevel
from foodfinder.models.search import SearchStatus
from foodfinder.services.nearby_backend import NearbySearchClient
from foodfinder.session.controller import (
    GEOLOCATION_FAILED_MESSAGE,
    GEOLOCATION_UNSUPPORTED_MESSAGE,
    INVALID_RADIUS_MESSAGE,
    SearchSession,
)
from foodfinder.session.geolocation import StaticGeolocation
from foodfinder.session.views import NO_RESULTS_MESSAGE, SEARCH_FAILED_MESSAGE

HERE = Coordinates(latitude=37.7749, longitude=-122.4194)


def make_place(place_id, latitude=37.775, longitude=-122.419):
    return Place(
        id=place_id,
        name=f"Place {place_id}",
        coordinates=Coordinates(latitude=latitude, longitude=longitude),
    )


class DeniedGeolocation:
    def get_current_position(self, on_success, on_error, options):
        on_error(1)


@pytest.fixture
def backend():
    backend = MagicMock(spec=NearbySearchClient)
    backend.search_nearby.return_value = [make_place("a"), make_place("b")]
    return backend


@pytest.fixture
def session(backend):
    return SearchSession(backend=backend, geolocation=StaticGeolocation(HERE.latitude, HERE.longitude))


@pytest.fixture
def located_session(session):
    asyncio.run(session.locate())
    return session


def test_locate_sets_coordinates(session):
    assert asyncio.run(session.locate()) == HERE
    assert session.coordinates == HERE
    assert session.location_error is None


def test_locate_unsupported(backend):
    session = SearchSession(backend=backend, geolocation=None)

    assert asyncio.run(session.locate()) is None
    assert session.location_error == GEOLOCATION_UNSUPPORTED_MESSAGE
    assert session.coordinates is None


def test_locate_failure_keeps_results_and_selection(located_session):
    asyncio.run(located_session.search())
    located_session.select("a")
    located_session._acquirer._capability = DeniedGeolocation()

    asyncio.run(located_session.locate())

    assert located_session.location_error == GEOLOCATION_FAILED_MESSAGE
    assert located_session.coordinates == HERE
    assert located_session.current_selection() == "a"
    assert len(located_session.result_set.places) == 2


def test_successful_locate_clears_previous_error(backend):
    session = SearchSession(backend=backend, geolocation=DeniedGeolocation())
    asyncio.run(session.locate())
    assert session.location_error == GEOLOCATION_FAILED_MESSAGE

    session._acquirer._capability = StaticGeolocation(1.0, 2.0)
    asyncio.run(session.locate())

    assert session.location_error is None
    assert session.coordinates == Coordinates(latitude=1.0, longitude=2.0)


def test_search_before_locating_is_a_no_op(session, backend):
    assert asyncio.run(session.search()) is None
    backend.search_nearby.assert_not_called()
    assert session.status == SearchStatus.IDLE
    assert session.generation == 0


def test_search_sends_current_filters(located_session, backend):
    located_session.set_min_price("2")
    located_session.set_max_price("3")
    located_session.set_radius_input("750")

    result_set = asyncio.run(located_session.search())

    request = backend.search_nearby.call_args[0][0]
    assert request.coordinates == HERE
    assert request.min_price == PriceLevel.MODERATE
    assert request.max_price == PriceLevel.EXPENSIVE
    assert request.radius == 750
    assert [place.id for place in result_set.places] == ["a", "b"]
    assert located_session.status == SearchStatus.SUCCEEDED


def test_empty_radius_makes_search_a_no_op(located_session, backend):
    """Test that an emptied radius field is reported and starts no generation."""
    asyncio.run(located_session.search())
    located_session.set_radius_input("")

    assert located_session.radius == 0
    assert asyncio.run(located_session.search()) is None
    assert located_session.notice == INVALID_RADIUS_MESSAGE
    assert located_session.generation == 1
    assert located_session.status == SearchStatus.SUCCEEDED
    assert backend.search_nearby.call_count == 1


def test_notice_cleared_by_next_valid_search(located_session):
    located_session.set_radius(0)
    asyncio.run(located_session.search())
    assert located_session.notice == INVALID_RADIUS_MESSAGE

    located_session.set_radius(300)
    asyncio.run(located_session.search())
    assert located_session.notice is None


def test_marker_and_row_clicks_highlight_both_views(located_session):
    """Test that a marker click and a row click for the same place produce the same state."""
    asyncio.run(located_session.search())

    located_session.on_marker_click("b")
    from_marker = (located_session.map_view(), located_session.list_view())

    located_session.close_details()
    located_session.on_row_click("b")
    from_row = (located_session.map_view(), located_session.list_view())

    assert from_marker == from_row
    map_view, list_view = from_row
    assert [marker.is_selected for marker in map_view.markers] == [False, True]
    assert [row.is_selected for row in list_view.rows] == [False, True]
    assert list_view.selected_id == "b"
    assert map_view.info_window.id == "b"
    assert map_view.info_window.name == "Place b"


def test_close_details_clears_selection(located_session):
    asyncio.run(located_session.search())
    located_session.on_marker_click("a")

    located_session.close_details()

    assert located_session.current_selection() is None
    assert located_session.map_view().info_window is None
    assert not any(row.is_selected for row in located_session.list_view().rows)


def test_new_results_without_selected_place_clear_selection(located_session, backend):
    asyncio.run(located_session.search())
    located_session.on_marker_click("a")

    backend.search_nearby.return_value = [make_place("c")]
    asyncio.run(located_session.search())

    assert located_session.current_selection() is None


def test_new_results_with_selected_place_keep_selection(located_session, backend):
    asyncio.run(located_session.search())
    located_session.on_row_click("b")

    backend.search_nearby.return_value = [make_place("c"), make_place("b")]
    asyncio.run(located_session.search())

    assert located_session.current_selection() == "b"
    assert [row.is_selected for row in located_session.list_view().rows] == [False, True]


def test_empty_results_show_no_places_message(located_session, backend):
    backend.search_nearby.return_value = []

    asyncio.run(located_session.search())

    list_view = located_session.list_view()
    assert list_view.rows == []
    assert list_view.message == NO_RESULTS_MESSAGE


def test_results_never_show_no_places_message(located_session):
    asyncio.run(located_session.search())
    assert located_session.list_view().message is None


def test_no_message_before_any_search(located_session):
    assert located_session.list_view().message is None


def test_failed_search_clears_list_and_reports_failure(located_session, backend):
    asyncio.run(located_session.search())
    located_session.select("a")
    backend.search_nearby.side_effect = SearchError(SearchErrorKind.MALFORMED, "bad body")

    asyncio.run(located_session.search())

    list_view = located_session.list_view()
    assert list_view.status == SearchStatus.FAILED
    assert list_view.rows == []
    assert list_view.message == SEARCH_FAILED_MESSAGE
    assert located_session.current_selection() is None


def test_map_view_requires_location(session):
    assert session.map_view() is None


def test_map_view_projects_results(located_session):
    asyncio.run(located_session.search())

    map_view = located_session.map_view()

    assert map_view.center == HERE
    assert map_view.zoom == 15
    assert [marker.id for marker in map_view.markers] == ["a", "b"]
    assert map_view.markers[0].position == Coordinates(latitude=37.775, longitude=-122.419)


def test_places_without_id_use_position_keys(located_session, backend):
    backend.search_nearby.return_value = [
        Place(name="No id", coordinates=HERE),
        make_place("x"),
    ]
    asyncio.run(located_session.search())

    rows = located_session.list_view().rows
    assert [row.key for row in rows] == ["0", "x"]
    assert rows[0].id == (1, 0)

    assert located_session.on_row_click((1, 0)) is True
    assert [marker.is_selected for marker in located_session.map_view().markers] == [True, False]


def test_price_options_follow_the_other_bound(session):
    session.set_min_price(2)
    session.set_max_price(3)

    options = session.price_options()

    assert [option.value for option in options["min"]] == ["1", "2", "3"]
    assert [option.value for option in options["max"]] == ["2", "3", "4"]
    assert options["min"][0].label == "1 (Inexpensive)"


def test_refreshing_location_while_loading_keeps_in_flight_search(located_session, backend):
    """Test that a new fix does not restart or discard the pending search."""

    async def scenario():
        search = asyncio.create_task(located_session.search())
        await asyncio.sleep(0)
        located_session._acquirer._capability = StaticGeolocation(1.0, 2.0)
        await located_session.locate()
        return await search

    result_set = asyncio.run(scenario())

    assert located_session.generation == 1
    assert [place.id for place in result_set.places] == ["a", "b"]
    assert backend.search_nearby.call_args[0][0].coordinates == HERE
    assert located_session.coordinates == Coordinates(latitude=1.0, longitude=2.0)
