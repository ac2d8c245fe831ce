from __future__ import annotations

import asyncio
import logging
import math
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from src.app.ports.output import IRoutePointRepository, IVehicleFeedProvider
from src.domain.algorithms.geo_utils import nearest_route_point
from src.domain.algorithms.vehicle_normalizer import normalize_vehicle_activity
from src.domain.models import (
    BusResult,
    FeedSnapshot,
    Rejection,
    RouteTable,
    StopContext,
    VehicleObservation,
)

from .route_table_service import load_route_table

logger = logging.getLogger(__name__)


def parse_timestamp(raw: str | None) -> datetime | None:
    if not raw:
        return None
    try:
        value = datetime.fromisoformat(raw.strip())
    except ValueError:
        logger.debug("Ignoring unparseable timestamp %r", raw)
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def data_age_minutes(
    response_timestamp: str | None, recorded_at: str | None
) -> int | None:
    """Whole minutes between recording and feed generation (half rounds up).

    May be negative when the clocks disagree.
    """

    response_at = parse_timestamp(response_timestamp)
    recorded = parse_timestamp(recorded_at)
    if response_at is None or recorded is None:
        return None
    minutes = (response_at - recorded).total_seconds() / 60.0
    return int(math.floor(minutes + 0.5))


def keeps_observation(observation: VehicleObservation, stop: StopContext) -> bool:
    if observation.line_ref not in stop.line_refs:
        return False
    direction = stop.direction_ref
    if direction is not None and observation.direction_ref != direction:
        return False
    # Buses approach this stop from the north; latitude alone is the gate.
    return observation.lat > stop.location.lat


def filter_activities(
    activities: Iterable[Mapping[str, Any]], stop: StopContext
) -> list[VehicleObservation]:
    kept: list[VehicleObservation] = []
    rejected: Counter[str] = Counter()

    for record in activities:
        outcome = normalize_vehicle_activity(record)
        if isinstance(outcome, Rejection):
            rejected[outcome.reason.value] += 1
            continue
        if keeps_observation(outcome, stop):
            kept.append(outcome)
        else:
            rejected["not_approaching"] += 1

    if rejected:
        logger.debug("Dropped vehicle activities: %s", dict(rejected))
    return kept


def enrich_observation(
    observation: VehicleObservation,
    *,
    route_table: RouteTable,
    response_timestamp: str | None,
) -> BusResult:
    estimated = None
    location = observation.location
    if location is not None:
        nearest = nearest_route_point(
            location, route_table.points_for(observation.line_ref)
        )
        if nearest is not None:
            estimated = nearest.minutes_away

    if observation.lon is None:
        combined = str(observation.lat)
    else:
        combined = f"{observation.lat} {observation.lon}"

    return BusResult(
        lat=observation.lat,
        lon=observation.lon,
        combined_coordinate_text=combined,
        line_ref=observation.line_ref,
        estimated_minutes_away=estimated,
        data_age_minutes=data_age_minutes(response_timestamp, observation.recorded_at),
        block_ref=observation.block_ref,
    )


def filter_and_enrich(
    snapshot: FeedSnapshot, route_table: RouteTable, stop: StopContext
) -> tuple[BusResult, ...]:
    """Filter the snapshot down to buses approaching the stop, in feed order."""

    kept = filter_activities(snapshot.activities, stop)
    return tuple(
        enrich_observation(
            obs,
            route_table=route_table,
            response_timestamp=snapshot.response_timestamp,
        )
        for obs in kept
    )


@dataclass(slots=True)
class BusFilterService:
    """Answers which monitored buses are approaching the stop and how soon.

    - The feed snapshot and the route table are fetched concurrently.
    - Filtering and enrichment run over resident data only.
    """

    stop: StopContext
    feed_provider: IVehicleFeedProvider
    route_repository: IRoutePointRepository

    async def approaching_buses(self) -> tuple[BusResult, ...]:
        snapshot, route_table = await asyncio.gather(
            self.feed_provider.fetch_snapshot(),
            asyncio.to_thread(
                load_route_table, self.route_repository, self.stop.line_refs
            ),
        )

        logger.info("Processing %d vehicle activities", len(snapshot.activities))
        buses = filter_and_enrich(snapshot, route_table, self.stop)
        logger.info("Found %d matching buses approaching the stop", len(buses))
        return buses
