from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_bus_filter_service
from src.adapters.api.schemas.buses import BusResultSchema, ErrorSchema
from src.app.services.bus_filter_service import BusFilterService

router = APIRouter(tags=["buses"])


@router.get(
    "/buses",
    response_model=list[BusResultSchema],
    responses={500: {"model": ErrorSchema}, 502: {"model": ErrorSchema}},
)
async def list_approaching_buses(
    service: BusFilterService = Depends(get_bus_filter_service),
) -> list[BusResultSchema]:
    buses = await service.approaching_buses()
    return [BusResultSchema.from_domain(bus) for bus in buses]
