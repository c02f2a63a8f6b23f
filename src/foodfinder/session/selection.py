"""Single source of truth for the highlighted place."""

import logging
from typing import Optional

from ..models.place import Identity, ResultSet

logger = logging.getLogger(__name__)


class SelectionCoordinator:
    """Holds the identity of the selected place, shared by the map and the list.

    Both views derive their highlight from ``is_selected``; no per-item
    selected flag is stored anywhere.
    """

    def __init__(self):
        self._selection: Optional[Identity] = None
        self._result_set = ResultSet()

    def current_selection(self) -> Optional[Identity]:
        return self._selection

    def is_selected(self, identity: Identity) -> bool:
        return self._selection is not None and self._selection == identity

    def select(self, identity: Identity) -> bool:
        """Select the place with ``identity``.

        Returns:
            False if the identity is not part of the current results, in which
            case the selection is left unchanged.
        """
        if identity not in self._result_set:
            logger.warning(f"Ignoring selection of unknown place {identity!r}")
            return False
        self._selection = identity
        return True

    def clear(self) -> None:
        self._selection = None

    def revalidate(self, result_set: ResultSet) -> None:
        """Track a new result set, dropping the selection if its place is gone."""
        self._result_set = result_set
        if self._selection is not None and self._selection not in result_set:
            logger.info(f"Clearing selection {self._selection!r}, not in new results")
            self._selection = None
