"""Exceptions raised by the Food Finder search engine."""

from enum import Enum


class GeoErrorReason(Enum):
    UNSUPPORTED = "unsupported"
    DENIED = "denied"
    UNAVAILABLE = "unavailable"
    TIMED_OUT = "timed_out"
    UNKNOWN = "unknown"


class SearchErrorKind(Enum):
    TRANSPORT = "transport"
    MALFORMED = "malformed"


class ValidationReason(Enum):
    NON_POSITIVE_RADIUS = "non_positive_radius"


class FoodFinderError(Exception):
    """Base class for all Food Finder errors."""


class GeoError(FoodFinderError):
    """The current position could not be acquired."""

    # Platform error codes reported by the geolocation capability
    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3

    def __init__(self, reason: GeoErrorReason, message: str = ""):
        self.reason = reason
        super().__init__(message or f"Geolocation failed: {reason.value}")

    @classmethod
    def from_code(cls, code: int) -> "GeoError":
        """Classify a platform error code."""
        reasons = {
            cls.PERMISSION_DENIED: GeoErrorReason.DENIED,
            cls.POSITION_UNAVAILABLE: GeoErrorReason.UNAVAILABLE,
            cls.TIMEOUT: GeoErrorReason.TIMED_OUT,
        }
        return cls(reasons.get(code, GeoErrorReason.UNKNOWN))


class SearchError(FoodFinderError):
    """A nearby search request failed in transport or returned an unreadable body."""

    def __init__(self, kind: SearchErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class SearchValidationError(FoodFinderError):
    """Search parameters that must stop a search from starting."""

    def __init__(self, reason: ValidationReason, message: str):
        self.reason = reason
        super().__init__(message)


class GooglePlacesError(FoodFinderError):
    """The Google Places API answered with a non-success status."""

    def __init__(self, status: str, message: str = ""):
        self.status = status
        super().__init__(message or f"Google Places API returned status {status}")
