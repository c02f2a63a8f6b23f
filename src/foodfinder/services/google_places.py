import logging
from typing import Dict, List, Optional

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..errors import GooglePlacesError

logger = logging.getLogger(__name__)

# Statuses the Nearby Search API uses for a successful call
SUCCESS_STATUSES = ("OK", "ZERO_RESULTS")


class GooglePlacesClient:

    def __init__(self, api_key: str, timeout: float = 10.0):
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = "https://maps.googleapis.com/maps/api/place"

    @retry(
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, max=4),
        reraise=True,
    )
    def _request(self, url: str, params: Dict) -> Dict:
        """Make a GET request to the Google Places API.

        Connection errors and timeouts are retried; HTTP error statuses are not.

        Args:
            url: URL to request
            params: Query parameters, without the API key

        Returns:
            JSON response from the API
        """
        response = requests.get(url, params={**params, "key": self.api_key}, timeout=self.timeout)

        if response.status_code != 200:
            logger.error(
                f"Error response from Google Places API: Status {response.status_code} "
                f"URL: {url} Body: {response.text}"
            )

        response.raise_for_status()
        return response.json()

    def search_nearby(
        self,
        latitude: float,
        longitude: float,
        radius: int,
        place_type: Optional[str] = None,
        open_now: bool = False,
        min_price: Optional[int] = None,
        max_price: Optional[int] = None,
    ) -> List[Dict]:
        """
        Search for places nearby a given location.

        Args:
            latitude (float): Latitude of the location
            longitude (float): Longitude of the location
            radius (int): Radius in meters
            place_type (str): Restrict results to this place type
            open_now (bool): Only return places open at request time
            min_price (int): Lowest price level to include (0-4)
            max_price (int): Highest price level to include (0-4)

        Returns:
            list: The ``results`` array from the Google Places API

        Raises:
            GooglePlacesError: If the API reports a non-success status
        """
        url = f"{self.base_url}/nearbysearch/json"

        params = {
            "location": f"{latitude},{longitude}",
            "radius": radius,
        }
        if place_type:
            params["type"] = place_type
        if open_now:
            params["opennow"] = "true"
        if min_price is not None:
            params["minprice"] = min_price
        if max_price is not None:
            params["maxprice"] = max_price

        data = self._request(url, params)

        status = data.get("status", "UNKNOWN_ERROR")
        if status not in SUCCESS_STATUSES:
            raise GooglePlacesError(status, data.get("error_message", ""))

        return data.get("results", [])
