from .bus import BusResult
from .geo import GeoPoint
from .route_points import RoutePoint, RouteTable
from .stop import StopContext
from .vehicle import FeedSnapshot, RejectReason, Rejection, VehicleObservation

__all__ = [
    "BusResult",
    "FeedSnapshot",
    "GeoPoint",
    "RejectReason",
    "Rejection",
    "RoutePoint",
    "RouteTable",
    "StopContext",
    "VehicleObservation",
]
