from __future__ import annotations

import logging
from typing import Iterable

from src.app.ports.output import IRoutePointRepository
from src.domain.exceptions import RoutePointsNotFound
from src.domain.models import RoutePoint, RouteTable

logger = logging.getLogger(__name__)


def load_route_table(
    repository: IRoutePointRepository, line_refs: Iterable[str]
) -> RouteTable:
    """Load route points for every requested line.

    A line whose points are missing or unreadable gets an empty entry; it never
    stops the other lines from loading.
    """

    points_by_line: dict[str, tuple[RoutePoint, ...]] = {}
    for line_ref in sorted(set(line_refs)):
        try:
            points = tuple(repository.load_points(line_ref))
        except RoutePointsNotFound:
            logger.info("No route points stored for line %s", line_ref)
            points = ()
        except Exception:
            logger.warning(
                "Failed to load route points for line %s", line_ref, exc_info=True
            )
            points = ()
        points_by_line[line_ref] = points

    return RouteTable(points_by_line=points_by_line)
