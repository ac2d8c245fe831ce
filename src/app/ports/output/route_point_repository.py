from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import RoutePoint


class IRoutePointRepository(ABC):
    """Port for reading precomputed route points of one line."""

    @abstractmethod
    def load_points(self, line_ref: str) -> tuple[RoutePoint, ...]:
        """Return the stored points, or raise RoutePointsNotFound."""
