import os
from functools import lru_cache

from ..config import BACKEND_URL, GOOGLE_MAPS_API_KEY_ENV, GOOGLE_MAPS_API_KEY_SECRET_NAME
from ..services.google_places import GooglePlacesClient
from ..services.nearby_backend import NearbySearchClient
from ..utils.aws import get_api_key_from_secret


def get_google_maps_api_key() -> str:
    """Get the Google Maps API key.

    The ``GOOGLE_MAPS_API_KEY`` environment variable wins; otherwise the key is
    read from AWS Secrets Manager.

    Raises:
        ValueError: If the API key cannot be retrieved.
    """
    api_key = os.environ.get(GOOGLE_MAPS_API_KEY_ENV)
    if api_key:
        return api_key

    api_key = get_api_key_from_secret(GOOGLE_MAPS_API_KEY_SECRET_NAME, GOOGLE_MAPS_API_KEY_ENV)
    if api_key is None:
        raise ValueError(
            f"Failed to retrieve Google Maps API key from secret {GOOGLE_MAPS_API_KEY_SECRET_NAME}"
        )
    return api_key


@lru_cache
def get_google_places_client() -> GooglePlacesClient:
    """Get a Google Places client instance.

    Returns a cached instance so the key lookup happens once per process.
    """
    return GooglePlacesClient(get_google_maps_api_key())


@lru_cache
def get_nearby_search_client(base_url: str = BACKEND_URL) -> NearbySearchClient:
    return NearbySearchClient(base_url)
