from __future__ import annotations

import math
import os
from dataclasses import dataclass, field

from src.domain.exceptions import ConfigurationError
from src.domain.models import StopContext

DEFAULT_FEED_URL = "https://data.bus-data.dft.gov.uk/api/v1/datafeed/788/"


def _unquote(ref: str) -> str:
    ref = ref.strip()
    if ref[:1] in {"'", '"'}:
        ref = ref[1:]
    if ref[-1:] in {"'", '"'}:
        ref = ref[:-1]
    return ref


def parse_line_refs(raw: str) -> frozenset[str]:
    """Parse a line ref list such as "[27]", "[5, 5A]" or '["27", "5A"]'."""

    cleaned = raw.replace("[", "").replace("]", "")
    refs = (_unquote(ref) for ref in cleaned.split(","))
    return frozenset(ref for ref in refs if ref)


def _required(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise ConfigurationError("Missing required environment variables")
    return value


def _float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        raise ConfigurationError(
            "Invalid latitude or longitude in environment variables"
        )
    return value


@dataclass(frozen=True, slots=True)
class BusStopSettings:
    """Per-deployment settings for the monitored stop.

    Env vars:
      - BUS_API_KEY: access key for the vehicle monitoring feed (required)
      - BUS_STOP_A_LATITUDE / BUS_STOP_A_LONGITUDE (required)
      - BUS_STOP_A_LINEREFS: e.g. "[27]" or "[5,5A]" (required)
      - BUS_STOP_A_DIRECTION: optional direction ref filter (e.g. "inbound")
      - BUS_FEED_URL: feed endpoint (default: BODS datafeed 788)
      - BUS_FEED_TIMEOUT_S: request timeout (default 10)
      - ROUTE_POINTS_BUCKET / ROUTE_POINTS_PREFIX: S3 location of route points
      - ROUTE_POINTS_PATH: local directory of route points (default data/busroutes)
    """

    api_key: str = field(repr=False)
    stop: StopContext
    feed_url: str = DEFAULT_FEED_URL
    feed_timeout_s: float = 10.0
    route_points_bucket: str | None = None
    route_points_prefix: str = "busroutes"
    route_points_path: str = "data/busroutes"

    @staticmethod
    def from_env() -> "BusStopSettings":
        api_key = _required("BUS_API_KEY")
        lat_raw = _required("BUS_STOP_A_LATITUDE")
        lon_raw = _required("BUS_STOP_A_LONGITUDE")
        line_refs_raw = _required("BUS_STOP_A_LINEREFS")

        stop = StopContext.create(
            lat=_float(lat_raw),
            lon=_float(lon_raw),
            line_refs=parse_line_refs(line_refs_raw),
            direction_ref=os.getenv("BUS_STOP_A_DIRECTION"),
        )

        timeout_s = 10.0
        if os.getenv("BUS_FEED_TIMEOUT_S"):
            try:
                timeout_s = float(os.environ["BUS_FEED_TIMEOUT_S"])
            except ValueError as exc:
                raise ConfigurationError("Invalid BUS_FEED_TIMEOUT_S") from exc

        return BusStopSettings(
            api_key=api_key,
            stop=stop,
            feed_url=(os.getenv("BUS_FEED_URL") or "").strip() or DEFAULT_FEED_URL,
            feed_timeout_s=timeout_s,
            route_points_bucket=(os.getenv("ROUTE_POINTS_BUCKET") or "").strip()
            or None,
            route_points_prefix=(
                os.getenv("ROUTE_POINTS_PREFIX") or "busroutes"
            ).strip("/"),
            route_points_path=os.getenv("ROUTE_POINTS_PATH") or "data/busroutes",
        )
