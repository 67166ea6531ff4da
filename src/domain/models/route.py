from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.domain.algorithms.geo_utils import haversine_distance_m

from .stop import Stop


class RouteStatus(str, Enum):
    FOUND = "found"
    ORIGIN_NOT_FOUND = "origin_not_found"
    DESTINATION_NOT_FOUND = "destination_not_found"
    NO_COMMON_TRIP = "no_common_trip"
    DATA_UNAVAILABLE = "data_unavailable"


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Outcome of a route lookup between two queried stops.

    `stops` runs from origin to destination when a trip was found and is
    empty otherwise.
    """

    status: RouteStatus
    origin: Stop | None = None
    destination: Stop | None = None
    stops: tuple[Stop, ...] = field(default_factory=tuple)
    trip_id: str | None = None

    @property
    def found(self) -> bool:
        return self.status is RouteStatus.FOUND and bool(self.stops)

    @property
    def path(self) -> tuple[Stop, ...]:
        """Stops to draw: the route, or a direct origin-destination hop."""

        if self.stops:
            return self.stops
        return tuple(s for s in (self.origin, self.destination) if s is not None)

    @property
    def total_distance_m(self) -> float | None:
        pts = self.path
        if len(pts) < 2:
            return None
        return float(sum(haversine_distance_m(a, b) for a, b in zip(pts, pts[1:])))
