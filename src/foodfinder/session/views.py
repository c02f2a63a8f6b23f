"""Read-only projections of the session consumed by the map and list renderers."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..config import DEFAULT_MAP_ZOOM
from ..models.place import Coordinates, Identity, Place, PriceLevel, ResultSet
from ..models.search import SearchStatus
from ..session.selection import SelectionCoordinator

NO_RESULTS_MESSAGE = "No places found for the selected criteria."
SEARCH_FAILED_MESSAGE = "Failed to search nearby places."


class Marker(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    id: Identity
    position: Coordinates
    is_selected: bool


class InfoWindow(BaseModel):
    """Detail overlay shown over the selected marker"""

    model_config = ConfigDict(frozen=True)

    id: Identity
    name: str
    position: Coordinates


class MapView(BaseModel):
    model_config = ConfigDict(frozen=True)

    center: Coordinates
    zoom: int = DEFAULT_MAP_ZOOM
    markers: List[Marker]
    info_window: Optional[InfoWindow] = None


class ListRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    id: Identity
    place: Place
    is_selected: bool


class ListView(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: SearchStatus
    rows: List[ListRow]
    selected_id: Optional[Identity] = None
    message: Optional[str] = None


class PriceOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str

    @classmethod
    def from_level(cls, level: PriceLevel) -> "PriceOption":
        return cls(value=str(level.value), label=level.label)


def render_key(place: Place, index: int) -> str:
    """Stable key for a rendered item. Not used for selection."""
    return place.id or str(index)


def build_map_view(
    center: Coordinates, result_set: ResultSet, selection: SelectionCoordinator
) -> MapView:
    markers = []
    info_window = None
    for index, place in enumerate(result_set.places):
        identity = result_set.identity_of(index)
        selected = selection.is_selected(identity)
        markers.append(
            Marker(
                key=render_key(place, index),
                id=identity,
                position=place.coordinates,
                is_selected=selected,
            )
        )
        if selected:
            info_window = InfoWindow(id=identity, name=place.name, position=place.coordinates)
    return MapView(center=center, markers=markers, info_window=info_window)


def build_list_view(
    status: SearchStatus,
    result_set: ResultSet,
    selection: SelectionCoordinator,
    shows_no_results: bool,
) -> ListView:
    rows = [
        ListRow(
            key=render_key(place, index),
            id=result_set.identity_of(index),
            place=place,
            is_selected=selection.is_selected(result_set.identity_of(index)),
        )
        for index, place in enumerate(result_set.places)
    ]

    message = None
    if shows_no_results:
        message = NO_RESULTS_MESSAGE
    elif status == SearchStatus.FAILED:
        message = SEARCH_FAILED_MESSAGE

    return ListView(
        status=status,
        rows=rows,
        selected_id=selection.current_selection(),
        message=message,
    )
