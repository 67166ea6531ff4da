from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IGtfsRepository
from src.domain.algorithms.trip_scan import route_stop_ids
from src.domain.exceptions import GtfsDataUnavailable
from src.domain.models import RouteResult, RouteStatus, Stop

from .stop_index import StopIndex

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RouteResolver:
    """Finds a single trip connecting two stops and lists the stops between.

    - Endpoints come from StopIndex.find (id, then name fragment).
    - The trip is the first contiguous stop_times run serving both stops.
    - Intermediate stops are resolved by exact id only.
    """

    gtfs_repository: IGtfsRepository
    stop_index: StopIndex = field(init=False)

    def __post_init__(self) -> None:
        self.stop_index = StopIndex(self.gtfs_repository)

    def _scan_trip(
        self, origin_id: str, destination_id: str
    ) -> tuple[str | None, list[str]]:
        with self.gtfs_repository.open_stop_times() as table:
            return route_stop_ids(table, origin_id, destination_id)

    def resolve_trip(
        self, origin_id: str, destination_id: str
    ) -> tuple[str | None, list[str]]:
        """(trip_id, stop ids); (None, []) when no trip or no data."""

        try:
            return self._scan_trip(origin_id, destination_id)
        except GtfsDataUnavailable as exc:
            logger.warning(
                "No route from %s to %s: %s", origin_id, destination_id, exc
            )
            return None, []

    def resolve(self, origin_id: str, destination_id: str) -> list[str]:
        """Ordered stop ids from origin to destination, or [] if no trip."""

        _, stop_ids = self.resolve_trip(origin_id, destination_id)
        return stop_ids

    def resolve_stops(self, origin_id: str, destination_id: str) -> list[Stop]:
        stop_ids = self.resolve(origin_id, destination_id)
        if not stop_ids:
            return []
        try:
            return self.stop_index.get_many(stop_ids)
        except GtfsDataUnavailable as exc:
            logger.warning(
                "Stops for %s -> %s unresolved: %s", origin_id, destination_id, exc
            )
            return []

    def find_route(self, origin_query: str, destination_query: str) -> RouteResult:
        """Resolve both queries and the route between them; never raises NotFound."""

        origin: Stop | None = None
        destination: Stop | None = None
        try:
            origin = self.stop_index.find(origin_query)
            if origin is None:
                logger.info("No stop matches origin %r", origin_query)
                return RouteResult(status=RouteStatus.ORIGIN_NOT_FOUND)

            destination = self.stop_index.find(destination_query)
            if destination is None:
                logger.info("No stop matches destination %r", destination_query)
                return RouteResult(
                    status=RouteStatus.DESTINATION_NOT_FOUND, origin=origin
                )

            trip_id, stop_ids = self._scan_trip(origin.id, destination.id)
            if not stop_ids:
                logger.info("No trip runs from %s to %s", origin.id, destination.id)
                return RouteResult(
                    status=RouteStatus.NO_COMMON_TRIP,
                    origin=origin,
                    destination=destination,
                )

            stops = self.stop_index.get_many(stop_ids)
        except GtfsDataUnavailable as exc:
            logger.warning("Route lookup degraded: %s", exc)
            return RouteResult(
                status=RouteStatus.DATA_UNAVAILABLE,
                origin=origin,
                destination=destination,
            )

        logger.info(
            "Trip %s connects %s to %s via %d stops",
            trip_id,
            origin.id,
            destination.id,
            len(stops),
        )
        return RouteResult(
            status=RouteStatus.FOUND,
            origin=origin,
            destination=destination,
            stops=tuple(stops),
            trip_id=trip_id,
        )
