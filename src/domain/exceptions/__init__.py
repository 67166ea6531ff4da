from .routing import GtfsDataUnavailable, RoutingError

__all__ = [
    "GtfsDataUnavailable",
    "RoutingError",
]
