"""Nearby search lifecycle with stale-response discard."""

import asyncio
import logging
from typing import Callable, List, Optional, Protocol, Sequence

from ..errors import SearchError, SearchErrorKind, SearchValidationError, ValidationReason
from ..models.place import Place, ResultSet
from ..models.search import SearchRequest, SearchStatus

logger = logging.getLogger(__name__)

ResultListener = Callable[[ResultSet], None]


class NearbySearchBackend(Protocol):
    def search_nearby(self, request: SearchRequest) -> List[Place]: ...


class SearchExecutor:
    """Runs searches and keeps only the most recently triggered generation.

    Every trigger takes the next generation number. A response is applied
    only if its generation is still the current one; anything older is
    dropped without touching the result set or the status, whatever order
    the responses arrive in.
    """

    def __init__(self, backend: NearbySearchBackend):
        self._backend = backend
        self._generation = 0
        self._status = SearchStatus.IDLE
        self._result_set = ResultSet()
        self._search_performed = False
        self._error: Optional[SearchError] = None
        self._listeners: List[ResultListener] = []

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def result_set(self) -> ResultSet:
        return self._result_set

    @property
    def search_performed(self) -> bool:
        return self._search_performed

    @property
    def error(self) -> Optional[SearchError]:
        return self._error

    @property
    def shows_no_results(self) -> bool:
        """True when the current search succeeded with nothing to show."""
        return (
            self._status == SearchStatus.SUCCEEDED
            and self._search_performed
            and len(self._result_set.places) == 0
        )

    def add_result_listener(self, listener: ResultListener) -> None:
        """Register a callback invoked whenever the result set is replaced."""
        self._listeners.append(listener)

    def begin(self, request: Optional[SearchRequest]) -> Optional[int]:
        """Start a new generation for ``request``.

        Returns:
            The new generation number, or None if there is no request to run

        Raises:
            SearchValidationError: If the radius is not positive. No generation
                is started and the status is left unchanged.
        """
        if request is None:
            logger.debug("Search triggered before a location is known, ignoring")
            return None
        if request.radius <= 0:
            raise SearchValidationError(
                ValidationReason.NON_POSITIVE_RADIUS,
                f"Search radius must be positive, got {request.radius}",
            )

        self._generation += 1
        self._status = SearchStatus.LOADING
        self._search_performed = False
        logger.info(f"Starting search generation {self._generation}")
        return self._generation

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(
                f"Discarding response for generation {generation}, "
                f"current generation is {self._generation}"
            )
            return True
        return False

    def complete(self, generation: int, places: Sequence[Place]) -> bool:
        """Apply a successful response. Returns False if it was stale."""
        if self._is_stale(generation):
            return False
        self._replace_results(ResultSet(generation=generation, places=tuple(places)))
        self._status = SearchStatus.SUCCEEDED
        self._error = None
        self._search_performed = True
        logger.info(f"Search generation {generation} returned {len(places)} places")
        return True

    def fail(self, generation: int, error: SearchError) -> bool:
        """Apply a failed response. Returns False if it was stale."""
        if self._is_stale(generation):
            return False
        # Old results no longer match the parameters that were searched
        self._replace_results(ResultSet(generation=generation))
        self._status = SearchStatus.FAILED
        self._error = error
        self._search_performed = True
        logger.warning(f"Search generation {generation} failed: {str(error)}")
        return True

    def _replace_results(self, result_set: ResultSet) -> None:
        self._result_set = result_set
        for listener in self._listeners:
            listener(result_set)

    async def execute(self, request: Optional[SearchRequest]) -> Optional[ResultSet]:
        """Run a search end to end.

        The backend call runs in the loop's executor; state only changes on
        the loop once the response arrives.

        Returns:
            The new result set if this search is still current when it lands,
            otherwise None (no request, failure, or superseded)

        Raises:
            SearchValidationError: See ``begin``.
        """
        generation = self.begin(request)
        if generation is None:
            return None

        loop = asyncio.get_running_loop()
        try:
            places = await loop.run_in_executor(None, self._backend.search_nearby, request)
        except SearchError as e:
            self.fail(generation, e)
            return None
        except Exception as e:
            logger.exception(f"Unexpected error in nearby search generation {generation}")
            self.fail(generation, SearchError(SearchErrorKind.TRANSPORT, f"Nearby search failed: {e}"))
            return None

        if self.complete(generation, places):
            return self._result_set
        return None
