"""Unit tests for the Google Places client."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from foodfinder.errors import GooglePlacesError
from foodfinder.services.google_places import GooglePlacesClient


@pytest.fixture
def google_places_client():
    return GooglePlacesClient("test-api-key", timeout=5)


def make_response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    if status_code != 200:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@patch("foodfinder.services.google_places.requests.get")
def test_search_nearby_builds_request(mock_get, google_places_client):
    mock_get.return_value = make_response({"status": "OK", "results": [{"place_id": "p1"}]})

    results = google_places_client.search_nearby(
        latitude=37.7749,
        longitude=-122.4194,
        radius=1000,
        place_type="restaurant",
        open_now=True,
        min_price=1,
        max_price=3,
    )

    assert results == [{"place_id": "p1"}]
    mock_get.assert_called_once_with(
        "https://maps.googleapis.com/maps/api/place/nearbysearch/json",
        params={
            "location": "37.7749,-122.4194",
            "radius": 1000,
            "type": "restaurant",
            "opennow": "true",
            "minprice": 1,
            "maxprice": 3,
            "key": "test-api-key",
        },
        timeout=5,
    )


@patch("foodfinder.services.google_places.requests.get")
def test_search_nearby_omits_unset_filters(mock_get, google_places_client):
    mock_get.return_value = make_response({"status": "ZERO_RESULTS", "results": []})

    assert google_places_client.search_nearby(latitude=1.0, longitude=2.0, radius=0) == []

    params = mock_get.call_args.kwargs["params"]
    assert set(params) == {"location", "radius", "key"}


@patch("foodfinder.services.google_places.requests.get")
def test_search_nearby_error_status(mock_get, google_places_client):
    mock_get.return_value = make_response(
        {"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."}
    )

    with pytest.raises(GooglePlacesError) as exc_info:
        google_places_client.search_nearby(latitude=1.0, longitude=2.0, radius=500)

    assert exc_info.value.status == "REQUEST_DENIED"
    assert "API key is invalid" in str(exc_info.value)


@patch("foodfinder.services.google_places.requests.get")
def test_search_nearby_retries_connection_errors(mock_get, google_places_client, mocker):
    mocker.patch("time.sleep")
    mock_get.side_effect = [
        requests.ConnectionError("reset"),
        requests.Timeout("slow"),
        make_response({"status": "OK", "results": []}),
    ]

    assert google_places_client.search_nearby(latitude=1.0, longitude=2.0, radius=500) == []
    assert mock_get.call_count == 3


@patch("foodfinder.services.google_places.requests.get")
def test_search_nearby_gives_up_after_three_attempts(mock_get, google_places_client, mocker):
    mocker.patch("time.sleep")
    mock_get.side_effect = requests.ConnectionError("down")

    with pytest.raises(requests.ConnectionError):
        google_places_client.search_nearby(latitude=1.0, longitude=2.0, radius=500)

    assert mock_get.call_count == 3


@patch("foodfinder.services.google_places.requests.get")
def test_search_nearby_does_not_retry_http_errors(mock_get, google_places_client):
    mock_get.return_value = make_response({}, status_code=500)

    with pytest.raises(requests.HTTPError):
        google_places_client.search_nearby(latitude=1.0, longitude=2.0, radius=500)

    assert mock_get.call_count == 1
