from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from src.domain.exceptions import ConfigurationError

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class StopContext:
    """The monitored stop and which buses are of interest there."""

    location: GeoPoint
    line_refs: frozenset[str]
    direction_ref: str | None = None

    @staticmethod
    def create(
        *,
        lat: float,
        lon: float,
        line_refs: Iterable[str],
        direction_ref: str | None = None,
    ) -> "StopContext":
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ConfigurationError("Invalid latitude or longitude for bus stop")

        refs = frozenset(r.strip() for r in line_refs if r and r.strip())
        if not refs:
            raise ConfigurationError("No line refs configured for bus stop")

        direction = (direction_ref or "").strip() or None
        return StopContext(
            location=GeoPoint(lat=lat, lon=lon),
            line_refs=refs,
            direction_ref=direction,
        )
