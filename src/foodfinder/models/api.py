"""API models for the nearby places endpoint."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


class NearbyQuery(BaseModel):
    """Query string parameters accepted by ``GET /api/nearby``"""

    lat: float = Field(..., description="Latitude of the search location")
    lng: float = Field(..., description="Longitude of the search location")
    radius: int = Field(0, description="Search radius in meters")
    place_type: Optional[str] = Field(
        None, alias="type", pattern=r"^[a-z_]+$", description="Google place type"
    )
    open_now: bool = Field(False, description="Only return places open right now")
    min_price: Optional[int] = Field(None, alias="minprice", ge=0, le=4)
    max_price: Optional[int] = Field(None, alias="maxprice", ge=0, le=4)

    @field_validator("radius", mode="before")
    @classmethod
    def parse_radius(cls, value: Any) -> int:
        """Unparsable or negative radius values become 0."""
        try:
            radius = int(value)
        except (TypeError, ValueError):
            return 0
        return radius if radius >= 0 else 0

    @field_validator("open_now", mode="before")
    @classmethod
    def parse_open_now(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return value == "true"

    @field_validator("place_type", "min_price", "max_price", mode="before")
    @classmethod
    def blank_is_missing(cls, value: Any) -> Any:
        return _blank_to_none(value)
