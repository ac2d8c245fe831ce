class BusFilterError(Exception):
    """Base exception for approaching-bus lookups."""


class ConfigurationError(BusFilterError):
    """Raised when stop settings are missing or invalid."""


class UpstreamFetchError(BusFilterError):
    """Raised when the vehicle feed cannot be fetched or parsed.

    Messages must never include the upstream access key.
    """


class RoutePointsNotFound(BusFilterError):
    """Raised by route point repositories when a line has no stored points."""
