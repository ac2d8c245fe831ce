from .route_point_repository import IRoutePointRepository
from .vehicle_feed_provider import IVehicleFeedProvider

__all__ = [
    "IRoutePointRepository",
    "IVehicleFeedProvider",
]
