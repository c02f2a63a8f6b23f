"""Place-related models for the Food Finder search engine."""

from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# A provider place id, or (generation, index) for places the provider sent without one
Identity = Union[str, Tuple[int, int]]


def _object_or_empty(value: Any) -> Dict[str, Any]:
    """Provider sub-objects of the wrong type are treated as missing."""
    return value if isinstance(value, dict) else {}


class PriceLevel(IntEnum):
    """Price bands offered by the search filters"""

    INEXPENSIVE = 1
    MODERATE = 2
    EXPENSIVE = 3
    VERY_EXPENSIVE = 4

    @property
    def label(self) -> str:
        return f"{self.value} ({self.name.replace('_', ' ').title()})"

    @classmethod
    def parse(cls, value: Union["PriceLevel", int, str]) -> "PriceLevel":
        """Coerce a select value ("1".."4") or int into a PriceLevel.

        Raises:
            ValueError: If the value is not a known price level.
        """
        if isinstance(value, cls):
            return value
        # bools are ints and floats would truncate, neither is a select value
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise ValueError(f"Unknown price level: '{value}'")
        try:
            return cls(int(value))
        except ValueError:
            raise ValueError(f"Unknown price level: '{value}'")


class Coordinates(BaseModel):
    """A latitude/longitude pair"""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class Place(BaseModel):
    """A single nearby search result"""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str = ""
    coordinates: Coordinates
    rating: Optional[float] = None
    price_level: Optional[int] = None
    address: str = ""
    business_status: Optional[str] = None
    open_now: Optional[bool] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Place":
        """Build a Place from a nearby search result object.

        Only the location is required; every other field degrades to an
        empty value when the provider leaves it out.

        Raises:
            ValueError: If the result carries no usable location.
        """
        geometry = _object_or_empty(data.get("geometry"))
        location = _object_or_empty(geometry.get("location"))
        try:
            coordinates = Coordinates(
                latitude=float(location["lat"]), longitude=float(location["lng"])
            )
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Place {data.get('place_id')!r} has no usable location")

        opening_hours = _object_or_empty(data.get("opening_hours"))

        return cls(
            id=data.get("place_id") or None,
            name=data.get("name") or "",
            coordinates=coordinates,
            rating=data.get("rating"),
            price_level=data.get("price_level"),
            address=data.get("vicinity") or data.get("formatted_address") or "",
            business_status=data.get("business_status"),
            open_now=opening_hours.get("open_now"),
        )


class ResultSet(BaseModel):
    """Places returned for one search generation"""

    model_config = ConfigDict(frozen=True)

    generation: int = 0
    places: Tuple[Place, ...] = Field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.places)

    def identity_of(self, index: int) -> Identity:
        """Selection identity of the place at ``index``."""
        place = self.places[index]
        if place.id:
            return place.id
        return (self.generation, index)

    def identities(self) -> List[Identity]:
        return [self.identity_of(index) for index in range(len(self.places))]

    def find(self, identity: Identity) -> Optional[Place]:
        """Return the place with the given identity, if it is in this result set."""
        if isinstance(identity, tuple):
            generation, index = identity
            if generation != self.generation or not 0 <= index < len(self.places):
                return None
            place = self.places[index]
            return None if place.id else place
        for place in self.places:
            if place.id == identity:
                return place
        return None

    def __contains__(self, identity: Identity) -> bool:
        return self.find(identity) is not None
