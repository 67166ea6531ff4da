from .route import RouteResult, RouteStatus
from .stop import Stop
from .trip import TripStopEntry, TripStopSequence

__all__ = [
    "RouteResult",
    "RouteStatus",
    "Stop",
    "TripStopEntry",
    "TripStopSequence",
]
