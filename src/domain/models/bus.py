from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BusResult:
    lat: float
    lon: float | None
    combined_coordinate_text: str
    line_ref: str
    estimated_minutes_away: int | float | None = None
    data_age_minutes: int | None = None
    block_ref: str | None = None
