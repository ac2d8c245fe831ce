from .local_route_point_repository import LocalRoutePointRepository
from .s3_route_point_repository import S3RoutePointRepository

__all__ = [
    "LocalRoutePointRepository",
    "S3RoutePointRepository",
]
