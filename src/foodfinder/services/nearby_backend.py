"""Client for the nearby places backend endpoint."""

import logging
from typing import List, Optional

import requests

from ..config import BACKEND_TIMEOUT_SECONDS, BACKEND_URL
from ..errors import SearchError, SearchErrorKind
from ..models.place import Place
from ..models.search import SearchRequest

logger = logging.getLogger(__name__)


class NearbySearchClient:
    """Issues nearby searches against ``GET {base_url}/api/nearby``."""

    def __init__(
        self,
        base_url: str = BACKEND_URL,
        timeout: float = BACKEND_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def search_nearby(self, request: SearchRequest) -> List[Place]:
        """Search for places matching the request.

        Args:
            request: The search parameters snapshot

        Returns:
            Places in the order the backend returned them (possibly empty)

        Raises:
            SearchError: TRANSPORT if the request fails or the backend answers
                with an error status, MALFORMED if the body is not a JSON array.
        """
        url = f"{self.base_url}/api/nearby"
        try:
            response = self._session.get(url, params=request.to_query_params(), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Nearby search request to {url} failed: {str(e)}")
            raise SearchError(SearchErrorKind.TRANSPORT, f"Nearby search request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise SearchError(SearchErrorKind.MALFORMED, "Nearby search response is not JSON") from e

        # The backend encodes an empty provider result as null
        if data is None:
            return []
        if not isinstance(data, list):
            raise SearchError(
                SearchErrorKind.MALFORMED,
                f"Expected a JSON array of places, got {type(data).__name__}",
            )

        places = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning(f"Skipping nearby result {index}: not an object")
                continue
            try:
                places.append(Place.from_api(item))
            except ValueError as e:
                logger.warning(f"Skipping nearby result {index}: {str(e)}")

        logger.info(f"Nearby search returned {len(places)} places")
        return places
