from __future__ import annotations

import json
from uuid import uuid4

import pytest

from src.adapters.aws import s3_client
from src.adapters.persistence import S3RoutePointRepository
from src.app.services.route_table_service import load_route_table
from src.domain.exceptions import RoutePointsNotFound


@pytest.fixture
def route_points_bucket(require_localstack: str) -> str:
    bucket = "busstop-test-route-points"
    s3 = s3_client()
    existing = {b["Name"] for b in s3.list_buckets().get("Buckets", [])}
    if bucket not in existing:
        s3.create_bucket(Bucket=bucket)
    return bucket


@pytest.mark.integration
def test_s3_route_point_repository_reads_line_file(route_points_bucket: str) -> None:
    prefix = f"busroutes-test-{uuid4()}"
    s3_client().put_object(
        Bucket=route_points_bucket,
        Key=f"{prefix}/27.json",
        Body=json.dumps(
            [{"latitude": 51.7, "longitude": -0.12, "minutesAway": 14}]
        ).encode("utf-8"),
    )

    repo = S3RoutePointRepository(bucket=route_points_bucket, prefix=prefix)
    points = repo.load_points("27")

    assert len(points) == 1
    assert points[0].minutes_away == 14
    assert points[0].location.lat == 51.7


@pytest.mark.integration
def test_s3_route_point_repository_missing_key(route_points_bucket: str) -> None:
    repo = S3RoutePointRepository(
        bucket=route_points_bucket, prefix=f"busroutes-test-{uuid4()}"
    )

    with pytest.raises(RoutePointsNotFound):
        repo.load_points("27")


@pytest.mark.integration
def test_route_table_from_s3_degrades_missing_lines(
    route_points_bucket: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    prefix = f"busroutes-test-{uuid4()}"
    monkeypatch.setenv("ROUTE_POINTS_BUCKET", route_points_bucket)
    monkeypatch.setenv("ROUTE_POINTS_PREFIX", prefix)
    s3_client().put_object(
        Bucket=route_points_bucket,
        Key=f"{prefix}/5.json",
        Body=b'[{"latitude": 51.6, "longitude": -0.1, "minutesAway": 2}]',
    )

    table = load_route_table(S3RoutePointRepository(), {"5", "5A"})

    assert [p.minutes_away for p in table.points_for("5")] == [2]
    assert table.points_for("5A") == ()
