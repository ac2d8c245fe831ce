from __future__ import annotations

import math
from typing import Any, Mapping

from src.domain.models import RejectReason, Rejection, VehicleObservation


def first_child(node: Any, name: str) -> Any:
    """Child `name` of a record tree node; the first one if it repeats."""

    if not isinstance(node, Mapping):
        return None
    value = node.get(name)
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _text(node: Any, name: str) -> str | None:
    value = first_child(node, name)
    if isinstance(value, str):
        return value
    return None


def parse_coordinate(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def normalize_vehicle_activity(
    record: Mapping[str, Any],
) -> VehicleObservation | Rejection:
    """Turn one raw VehicleActivity record into an observation.

    Checks run in order and stop at the first failure. Only the latitude gates
    acceptance; a missing or invalid longitude is carried as None.
    """

    journey = first_child(record, "MonitoredVehicleJourney")
    if not isinstance(journey, Mapping):
        return Rejection(RejectReason.NO_JOURNEY)

    location = first_child(journey, "VehicleLocation")
    if not isinstance(location, Mapping):
        return Rejection(RejectReason.NO_LOCATION)

    line_ref = (_text(journey, "LineRef") or "").strip()
    if not line_ref:
        return Rejection(RejectReason.NO_LINE_REF)

    direction_ref = _text(journey, "DirectionRef")
    if not direction_ref:
        return Rejection(RejectReason.NO_DIRECTION_REF)

    lat = parse_coordinate(_text(location, "Latitude"))
    if lat is None:
        return Rejection(RejectReason.INVALID_LATITUDE)

    return VehicleObservation(
        line_ref=line_ref,
        direction_ref=direction_ref,
        lat=lat,
        lon=parse_coordinate(_text(location, "Longitude")),
        recorded_at=_text(record, "RecordedAtTime") or None,
        block_ref=_text(journey, "BlockRef") or None,
    )
