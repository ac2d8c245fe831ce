from .errors import (
    BusFilterError,
    ConfigurationError,
    RoutePointsNotFound,
    UpstreamFetchError,
)

__all__ = [
    "BusFilterError",
    "ConfigurationError",
    "RoutePointsNotFound",
    "UpstreamFetchError",
]
