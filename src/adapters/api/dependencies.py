from __future__ import annotations

from src.adapters.persistence import LocalRoutePointRepository, S3RoutePointRepository
from src.adapters.realtime.http_siri_vm_feed_provider import HttpSiriVmFeedProvider
from src.adapters.settings import BusStopSettings
from src.app.ports.output import IRoutePointRepository
from src.app.services.bus_filter_service import BusFilterService


def build_bus_filter_service(settings: BusStopSettings) -> BusFilterService:
    route_repository: IRoutePointRepository
    if settings.route_points_bucket:
        route_repository = S3RoutePointRepository(
            bucket=settings.route_points_bucket,
            prefix=settings.route_points_prefix,
        )
    else:
        route_repository = LocalRoutePointRepository(
            base_path=settings.route_points_path
        )

    feed_provider = HttpSiriVmFeedProvider(
        url=settings.feed_url,
        api_key=settings.api_key,
        timeout_s=settings.feed_timeout_s,
    )

    return BusFilterService(
        stop=settings.stop,
        feed_provider=feed_provider,
        route_repository=route_repository,
    )


def get_bus_filter_service() -> BusFilterService:
    # Raises ConfigurationError before anything is fetched.
    return build_bus_filter_service(BusStopSettings.from_env())
