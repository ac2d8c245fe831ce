from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .geo import GeoPoint


class RejectReason(str, Enum):
    NO_JOURNEY = "no_journey"
    NO_LOCATION = "no_location"
    NO_LINE_REF = "no_line_ref"
    NO_DIRECTION_REF = "no_direction_ref"
    INVALID_LATITUDE = "invalid_latitude"


@dataclass(frozen=True, slots=True)
class Rejection:
    reason: RejectReason


@dataclass(frozen=True, slots=True)
class VehicleObservation:
    """One validated vehicle activity from the feed.

    Longitude never gates validation, so it may be missing.
    """

    line_ref: str
    direction_ref: str
    lat: float
    lon: float | None = None
    recorded_at: str | None = None
    block_ref: str | None = None

    @property
    def location(self) -> GeoPoint | None:
        if self.lon is None:
            return None
        return GeoPoint(lat=self.lat, lon=self.lon)


@dataclass(frozen=True, slots=True)
class FeedSnapshot:
    """One fetch of the upstream vehicle monitoring feed.

    `activities` are raw record trees (element name -> child tree or text).
    """

    response_timestamp: str | None = None
    activities: tuple[Mapping[str, Any], ...] = field(default_factory=tuple)
