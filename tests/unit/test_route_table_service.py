from __future__ import annotations

from dataclasses import dataclass, field

from src.app.services.route_table_service import load_route_table
from src.domain.exceptions import RoutePointsNotFound
from src.domain.models import GeoPoint, RoutePoint

POINT = RoutePoint(location=GeoPoint(lat=51.6, lon=-0.1), minutes_away=3)


@dataclass(slots=True)
class FakeRouteRepository:
    points: dict[str, tuple[RoutePoint, ...]] = field(default_factory=dict)
    broken: set[str] = field(default_factory=set)
    requested: list[str] = field(default_factory=list)

    def load_points(self, line_ref: str) -> tuple[RoutePoint, ...]:
        self.requested.append(line_ref)
        if line_ref in self.broken:
            raise ValueError("Route points document must be a JSON list")
        if line_ref not in self.points:
            raise RoutePointsNotFound(line_ref)
        return self.points[line_ref]


def test_every_requested_line_gets_an_entry() -> None:
    repo = FakeRouteRepository(points={"27": (POINT,)})

    table = load_route_table(repo, {"27", "5A"})

    assert table.points_by_line == {"27": (POINT,), "5A": ()}
    assert table.points_for("5A") == ()


def test_points_for_unknown_line_is_empty() -> None:
    table = load_route_table(FakeRouteRepository(), set())

    assert table.points_for("99") == ()


def test_failing_line_does_not_abort_siblings() -> None:
    repo = FakeRouteRepository(points={"5": (POINT,), "7": (POINT,)}, broken={"6"})

    table = load_route_table(repo, ["5", "6", "7"])

    assert sorted(repo.requested) == ["5", "6", "7"]
    assert table.points_for("5") == (POINT,)
    assert table.points_for("6") == ()
    assert table.points_for("7") == (POINT,)
