"""Min/max price band kept consistent under independent edits."""

import logging
from typing import List, Union

from ..models.place import PriceLevel

logger = logging.getLogger(__name__)

PriceInput = Union[PriceLevel, int, str]


class PriceRange:
    """Holds the (min_price, max_price) pair with min_price <= max_price.

    Each setter repairs the other bound instead of rejecting the input: raising
    the minimum above the maximum pulls the maximum up, and lowering the
    maximum below the minimum pulls the minimum down.
    """

    def __init__(
        self,
        min_price: PriceInput = PriceLevel.INEXPENSIVE,
        max_price: PriceInput = PriceLevel.VERY_EXPENSIVE,
    ):
        self._min = PriceLevel.parse(min_price)
        self._max = PriceLevel.parse(max_price)
        if self._min > self._max:
            raise ValueError(f"min_price {self._min} is above max_price {self._max}")

    @property
    def min_price(self) -> PriceLevel:
        return self._min

    @property
    def max_price(self) -> PriceLevel:
        return self._max

    def set_min(self, level: PriceInput) -> None:
        self._min = PriceLevel.parse(level)
        if self._min > self._max:
            logger.debug(f"Raising max price to {self._min.value} to follow min price")
            self._max = self._min

    def set_max(self, level: PriceInput) -> None:
        self._max = PriceLevel.parse(level)
        if self._max < self._min:
            logger.debug(f"Lowering min price to {self._max.value} to follow max price")
            self._min = self._max

    def min_options(self) -> List[PriceLevel]:
        """Levels the minimum may be set to without moving the maximum."""
        return [level for level in PriceLevel if level <= self._max]

    def max_options(self) -> List[PriceLevel]:
        """Levels the maximum may be set to without moving the minimum."""
        return [level for level in PriceLevel if level >= self._min]

    def __repr__(self) -> str:
        return f"PriceRange(min_price={self._min.value}, max_price={self._max.value})"
