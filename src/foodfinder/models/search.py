"""Search request and status models."""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict

from ..models.place import Coordinates, PriceLevel

DEFAULT_PLACE_TYPE = "restaurant"


class SearchStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SearchRequest(BaseModel):
    """Snapshot of the search parameters taken when a search is triggered"""

    model_config = ConfigDict(frozen=True)

    coordinates: Coordinates
    min_price: PriceLevel
    max_price: PriceLevel
    radius: int
    place_type: str = DEFAULT_PLACE_TYPE
    open_now: bool = True

    def to_query_params(self) -> Dict[str, str]:
        """Query string parameters for the nearby search endpoint."""
        return {
            "lat": str(self.coordinates.latitude),
            "lng": str(self.coordinates.longitude),
            "type": self.place_type,
            "open_now": "true" if self.open_now else "false",
            "minprice": str(int(self.min_price)),
            "maxprice": str(int(self.max_price)),
            "radius": str(self.radius),
        }
