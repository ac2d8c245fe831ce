from __future__ import annotations

import math
from typing import Iterable

from src.domain.models import GeoPoint, RoutePoint

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers."""

    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * EARTH_RADIUS_KM * math.asin(math.sqrt(s))


def nearest_route_point(
    point: GeoPoint, candidates: Iterable[RoutePoint]
) -> RoutePoint | None:
    """Closest candidate to `point`; the first one wins on ties.

    There is no distance cutoff: a far-away nearest point is still returned.
    """

    best: RoutePoint | None = None
    best_d = float("inf")
    for candidate in candidates:
        d = haversine_distance_km(point, candidate.location)
        if d < best_d:
            best_d = d
            best = candidate
    return best
