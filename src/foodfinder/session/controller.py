"""Search session: the single owner of the location, filters, results and selection."""

import logging
from typing import Dict, List, Optional

from ..config import DEFAULT_RADIUS_METERS
from ..errors import GeoError, GeoErrorReason, SearchValidationError
from ..models.place import Coordinates, Identity, ResultSet
from ..models.search import SearchStatus
from ..session.executor import NearbySearchBackend, SearchExecutor
from ..session.geolocation import CoordinateAcquirer, GeolocationCapability, PositionOptions
from ..session.parameters import build_search_request, parse_radius
from ..session.price_range import PriceInput, PriceRange
from ..session.selection import SelectionCoordinator
from ..session.views import ListView, MapView, PriceOption, build_list_view, build_map_view

logger = logging.getLogger(__name__)

GEOLOCATION_UNSUPPORTED_MESSAGE = "Geolocation is not supported by your browser"
GEOLOCATION_FAILED_MESSAGE = "Unable to retrieve your location"
INVALID_RADIUS_MESSAGE = "Search radius must be a positive number of meters."


class SearchSession:
    """Wires geolocation, filters, search and selection together.

    All mutations go through the methods below; the views only ever see
    read-only projections built by ``map_view`` and ``list_view``.
    """

    def __init__(
        self,
        backend: NearbySearchBackend,
        geolocation: Optional[GeolocationCapability],
        position_options: Optional[PositionOptions] = None,
        radius: int = DEFAULT_RADIUS_METERS,
    ):
        self._acquirer = CoordinateAcquirer(geolocation, position_options)
        self._executor = SearchExecutor(backend)
        self._selection = SelectionCoordinator()
        self._executor.add_result_listener(self._selection.revalidate)

        self.price_range = PriceRange()
        self._coordinates: Optional[Coordinates] = None
        self._radius = radius
        self._location_error: Optional[str] = None
        self._notice: Optional[str] = None

    # -- location --------------------------------------------------------

    @property
    def coordinates(self) -> Optional[Coordinates]:
        return self._coordinates

    @property
    def location_error(self) -> Optional[str]:
        return self._location_error

    async def locate(self) -> Optional[Coordinates]:
        """Acquire (or refresh) the current position.

        Failures only set ``location_error``; results and selection are not
        touched. A refresh while a search is loading does not restart it.
        """
        try:
            coordinates = await self._acquirer.acquire()
        except GeoError as e:
            logger.warning(f"Could not acquire location: {e.reason.value}")
            if e.reason == GeoErrorReason.UNSUPPORTED:
                self._location_error = GEOLOCATION_UNSUPPORTED_MESSAGE
            else:
                self._location_error = GEOLOCATION_FAILED_MESSAGE
            return None

        self._coordinates = coordinates
        self._location_error = None
        return coordinates

    # -- filters ---------------------------------------------------------

    @property
    def radius(self) -> int:
        return self._radius

    def set_min_price(self, level: PriceInput) -> None:
        self.price_range.set_min(level)

    def set_max_price(self, level: PriceInput) -> None:
        self.price_range.set_max(level)

    def set_radius(self, radius: int) -> None:
        self._radius = radius if radius > 0 else 0

    def set_radius_input(self, text: str) -> None:
        """Update the radius from the text field."""
        self._radius = parse_radius(text)

    def price_options(self) -> Dict[str, List[PriceOption]]:
        """Selectable values for both price fields."""
        return {
            "min": [PriceOption.from_level(level) for level in self.price_range.min_options()],
            "max": [PriceOption.from_level(level) for level in self.price_range.max_options()],
        }

    # -- search ----------------------------------------------------------

    @property
    def status(self) -> SearchStatus:
        return self._executor.status

    @property
    def generation(self) -> int:
        return self._executor.generation

    @property
    def search_performed(self) -> bool:
        return self._executor.search_performed

    @property
    def result_set(self) -> ResultSet:
        return self._executor.result_set

    @property
    def notice(self) -> Optional[str]:
        """Message for a search that was refused before it started."""
        return self._notice

    @property
    def executor(self) -> SearchExecutor:
        return self._executor

    async def search(self) -> Optional[ResultSet]:
        """Trigger a nearby search with the current filters.

        No-op without a location. A non-positive radius is reported through
        ``notice`` and does not start a search.
        """
        request = build_search_request(
            self._coordinates,
            self.price_range.min_price,
            self.price_range.max_price,
            self._radius,
        )
        if request is not None:
            self._notice = None
        try:
            return await self._executor.execute(request)
        except SearchValidationError as e:
            logger.warning(f"Search not started: {str(e)}")
            self._notice = INVALID_RADIUS_MESSAGE
            return None

    # -- selection -------------------------------------------------------

    def current_selection(self) -> Optional[Identity]:
        return self._selection.current_selection()

    def select(self, identity: Identity) -> bool:
        return self._selection.select(identity)

    def on_marker_click(self, identity: Identity) -> bool:
        return self.select(identity)

    def on_row_click(self, identity: Identity) -> bool:
        return self.select(identity)

    def close_details(self) -> None:
        """Close the detail overlay, which drops the selection."""
        self._selection.clear()

    # -- projections -----------------------------------------------------

    def map_view(self) -> Optional[MapView]:
        """Map projection, or None until a location is known."""
        if self._coordinates is None:
            return None
        return build_map_view(self._coordinates, self._executor.result_set, self._selection)

    def list_view(self) -> ListView:
        return build_list_view(
            self._executor.status,
            self._executor.result_set,
            self._selection,
            self._executor.shows_no_results,
        )
