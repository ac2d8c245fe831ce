from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.adapters.persistence import LocalRoutePointRepository
from src.adapters.persistence.route_points_codec import decode_route_points
from src.domain.exceptions import RoutePointsNotFound
from src.domain.models import GeoPoint, RoutePoint


def test_load_points_reads_line_file(tmp_path: Path) -> None:
    (tmp_path / "27.json").write_text(
        json.dumps(
            [
                {"latitude": 51.7, "longitude": -0.12, "minutesAway": 14},
                {"latitude": 51.6, "longitude": -0.12, "minutesAway": 5.5},
            ]
        ),
        encoding="utf-8",
    )

    points = LocalRoutePointRepository(base_path=tmp_path).load_points("27")

    assert points == (
        RoutePoint(location=GeoPoint(lat=51.7, lon=-0.12), minutes_away=14),
        RoutePoint(location=GeoPoint(lat=51.6, lon=-0.12), minutes_away=5.5),
    )


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    repo = LocalRoutePointRepository(base_path=tmp_path)

    with pytest.raises(RoutePointsNotFound):
        repo.load_points("27")


def test_base_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "5A.json").write_text("[]", encoding="utf-8")
    monkeypatch.setenv("ROUTE_POINTS_PATH", str(tmp_path))

    assert LocalRoutePointRepository().load_points("5A") == ()


def test_decode_skips_malformed_entries() -> None:
    body = json.dumps(
        [
            {"latitude": 51.7, "longitude": -0.12, "minutesAway": 14},
            {"latitude": "x", "longitude": -0.12, "minutesAway": 3},
            {"latitude": 51.6, "longitude": -0.12},
            {"latitude": 51.6, "longitude": -0.12, "minutesAway": -1},
            {"latitude": 51.6, "longitude": -0.12, "minutesAway": True},
            "oops",
        ]
    )

    points = decode_route_points(body)

    assert [p.minutes_away for p in points] == [14]


def test_decode_rejects_non_list_document() -> None:
    with pytest.raises(ValueError):
        decode_route_points(b'{"latitude": 51.7}')
