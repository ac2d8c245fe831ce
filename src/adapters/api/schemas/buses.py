from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.domain.models import BusResult


class BusResultSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    latitude: float
    longitude: float | None = None
    combined_coordinate_text: str
    line_ref: str
    estimated_minutes_away: int | float | None = None
    data_age_minutes: int | None = None
    block_ref: str | None = None

    @classmethod
    def from_domain(cls, bus: BusResult) -> "BusResultSchema":
        return cls(
            latitude=bus.lat,
            longitude=bus.lon,
            combined_coordinate_text=bus.combined_coordinate_text,
            line_ref=bus.line_ref,
            estimated_minutes_away=bus.estimated_minutes_away,
            data_age_minutes=bus.data_age_minutes,
            block_ref=bus.block_ref,
        )


class ErrorSchema(BaseModel):
    message: str
