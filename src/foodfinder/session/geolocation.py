"""Acquisition of the user's current position."""

import asyncio
import logging
import time
from typing import Callable, Optional, Protocol, Tuple

import requests
from pydantic import BaseModel

from ..config import IP_GEOLOCATION_URL
from ..errors import GeoError, GeoErrorReason
from ..models.place import Coordinates

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[float, float], None]
ErrorCallback = Callable[[int], None]


class PositionOptions(BaseModel):
    """Options handed to the geolocation capability"""

    enable_high_accuracy: bool = False
    timeout: Optional[float] = None  # seconds
    maximum_age: float = 0.0  # seconds a cached fix may be reused


class GeolocationCapability(Protocol):
    def get_current_position(
        self, on_success: SuccessCallback, on_error: ErrorCallback, options: PositionOptions
    ) -> None: ...


class StaticGeolocation:
    """Capability that always reports the same position."""

    def __init__(self, latitude: float, longitude: float):
        self.latitude = latitude
        self.longitude = longitude

    def get_current_position(
        self, on_success: SuccessCallback, on_error: ErrorCallback, options: PositionOptions
    ) -> None:
        on_success(self.latitude, self.longitude)


class IpGeolocation:
    """Capability that estimates the position from the public IP address.

    The HTTP lookup runs in the event loop's executor and the callbacks are
    invoked back on the loop.
    """

    def __init__(self, url: str = IP_GEOLOCATION_URL, session: Optional[requests.Session] = None):
        self.url = url
        self._session = session or requests.Session()
        self._last_fix: Optional[Tuple[float, float, float]] = None

    def _lookup(self, timeout: Optional[float]) -> Tuple[float, float]:
        response = self._session.get(self.url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
        return float(data["latitude"]), float(data["longitude"])

    def get_current_position(
        self, on_success: SuccessCallback, on_error: ErrorCallback, options: PositionOptions
    ) -> None:
        if self._last_fix is not None and options.maximum_age > 0:
            latitude, longitude, fixed_at = self._last_fix
            if time.monotonic() - fixed_at <= options.maximum_age:
                on_success(latitude, longitude)
                return

        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, self._lookup, options.timeout)

        def deliver(done: asyncio.Future) -> None:
            if done.cancelled():
                logger.warning("IP geolocation lookup was cancelled")
                on_error(0)
                return
            error = done.exception()
            if error is None:
                latitude, longitude = done.result()
                self._last_fix = (latitude, longitude, time.monotonic())
                on_success(latitude, longitude)
            elif isinstance(error, requests.Timeout):
                logger.warning(f"IP geolocation lookup timed out: {error}")
                on_error(GeoError.TIMEOUT)
            elif isinstance(error, (requests.RequestException, KeyError, TypeError, ValueError)):
                logger.warning(f"IP geolocation lookup failed: {error}")
                on_error(GeoError.POSITION_UNAVAILABLE)
            else:
                logger.error(f"Unexpected IP geolocation failure: {error!r}")
                on_error(0)

        future.add_done_callback(deliver)


class CoordinateAcquirer:
    """Turns the callback-based capability into an awaitable position fix."""

    def __init__(
        self,
        capability: Optional[GeolocationCapability],
        options: Optional[PositionOptions] = None,
    ):
        self._capability = capability
        self.options = options or PositionOptions()

    async def acquire(self) -> Coordinates:
        """Ask the capability for the current position.

        Raises:
            GeoError: If no capability is available or the platform reports a failure.
        """
        if self._capability is None:
            raise GeoError(GeoErrorReason.UNSUPPORTED)

        future = asyncio.get_running_loop().create_future()

        def on_success(latitude: float, longitude: float) -> None:
            if not future.done():
                future.set_result(Coordinates(latitude=latitude, longitude=longitude))

        def on_error(code: int) -> None:
            if not future.done():
                future.set_exception(GeoError.from_code(code))

        self._capability.get_current_position(on_success, on_error, self.options)
        coordinates = await future
        logger.info(f"Acquired position {coordinates.latitude}, {coordinates.longitude}")
        return coordinates
