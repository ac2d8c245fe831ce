from __future__ import annotations

import json
import math
from typing import Any

from src.domain.models import GeoPoint, RoutePoint


def _number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    return out if math.isfinite(out) else None


def decode_route_points(body: bytes | str) -> tuple[RoutePoint, ...]:
    """Decode a route points document.

    The document is a JSON list of {"latitude", "longitude", "minutesAway"}.
    Malformed entries are skipped; a document that is not a list is rejected.
    """

    payload = json.loads(body)
    if not isinstance(payload, list):
        raise ValueError("Route points document must be a JSON list")

    points: list[RoutePoint] = []
    for entry in payload:
        if not isinstance(entry, dict):
            continue
        lat = _number(entry.get("latitude"))
        lon = _number(entry.get("longitude"))
        minutes = entry.get("minutesAway")
        if lat is None or lon is None or _number(minutes) is None:
            continue
        if not isinstance(minutes, (int, float)) or minutes < 0:
            continue
        points.append(
            RoutePoint(location=GeoPoint(lat=lat, lon=lon), minutes_away=minutes)
        )

    return tuple(points)
