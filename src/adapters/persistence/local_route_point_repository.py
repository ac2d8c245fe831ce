from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import IRoutePointRepository
from src.domain.exceptions import RoutePointsNotFound
from src.domain.models import RoutePoint

from .route_points_codec import decode_route_points


@dataclass(slots=True)
class LocalRoutePointRepository(IRoutePointRepository):
    """Loads route points from `<base_path>/<line_ref>.json`.

    Env vars:
      - ROUTE_POINTS_PATH: directory of route point files (default data/busroutes)
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("ROUTE_POINTS_PATH") or "data/busroutes"
        return Path(value)

    def load_points(self, line_ref: str) -> tuple[RoutePoint, ...]:
        path = self._base() / f"{line_ref}.json"
        try:
            body = path.read_bytes()
        except FileNotFoundError as exc:
            raise RoutePointsNotFound(f"No route points for line {line_ref}") from exc
        return decode_route_points(body)
