"""Assembly of search requests from the current filter values."""

from typing import Optional

from ..models.place import Coordinates, PriceLevel
from ..models.search import SearchRequest


def parse_radius(text: str) -> int:
    """Coerce radius field input to metres.

    Positive integers pass through; empty, non-numeric and non-positive input
    all become 0, which the executor refuses to search with.
    """
    try:
        value = int(str(text).strip())
    except ValueError:
        return 0
    return value if value > 0 else 0


def build_search_request(
    coordinates: Optional[Coordinates],
    min_price: PriceLevel,
    max_price: PriceLevel,
    radius: int,
) -> Optional[SearchRequest]:
    """Snapshot the filters into a SearchRequest.

    Returns None when no location is known yet. The radius is passed through
    unchanged, including 0.
    """
    if coordinates is None:
        return None
    return SearchRequest(
        coordinates=coordinates,
        min_price=min_price,
        max_price=max_price,
        radius=radius,
    )
