from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class RoutePoint:
    """A precomputed position along a line with a static ETA to the stop."""

    location: GeoPoint
    minutes_away: int | float

    def __post_init__(self) -> None:
        if self.minutes_away < 0:
            raise ValueError(f"Invalid minutes_away: {self.minutes_away}")


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Route points per line ref.

    Built once per request from the monitored line refs; every requested line
    has an entry, possibly empty.
    """

    points_by_line: Mapping[str, tuple[RoutePoint, ...]] = field(default_factory=dict)

    def points_for(self, line_ref: str) -> tuple[RoutePoint, ...]:
        return self.points_by_line.get(line_ref, ())
