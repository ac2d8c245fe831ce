from __future__ import annotations

import os
from dataclasses import dataclass

from botocore.exceptions import ClientError

from src.adapters.aws import s3_client
from src.app.ports.output import IRoutePointRepository
from src.domain.exceptions import RoutePointsNotFound
from src.domain.models import RoutePoint

from .route_points_codec import decode_route_points


@dataclass(slots=True)
class S3RoutePointRepository(IRoutePointRepository):
    """Route points stored in S3 as `<prefix>/<line_ref>.json`.

    Env vars:
      - ROUTE_POINTS_BUCKET (required)
      - ROUTE_POINTS_PREFIX (default: busroutes)
      - ENDPOINT_URL (preferred for LocalStack)
    """

    bucket: str | None = None
    prefix: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("ROUTE_POINTS_BUCKET")
        if not value:
            raise RuntimeError("Missing ROUTE_POINTS_BUCKET")
        return value

    def _prefix(self) -> str:
        return (
            self.prefix or os.getenv("ROUTE_POINTS_PREFIX") or "busroutes"
        ).strip("/")

    def _key(self, line_ref: str) -> str:
        return f"{self._prefix()}/{line_ref}.json"

    def load_points(self, line_ref: str) -> tuple[RoutePoint, ...]:
        s3 = s3_client()
        try:
            obj = s3.get_object(Bucket=self._bucket(), Key=self._key(line_ref))
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in {"NoSuchKey", "404", "NotFound"}:
                raise RoutePointsNotFound(
                    f"No route points for line {line_ref}"
                ) from exc
            raise
        return decode_route_points(obj["Body"].read())
