from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from src.app.ports.output import IGtfsRepository
from src.domain.algorithms.stop_search import find_stop, find_stops_by_id
from src.domain.models import Stop


@dataclass(slots=True)
class StopIndex:
    """Stop lookups against the stops table.

    Every call performs its own scan of the file. A missing file surfaces as
    GtfsDataUnavailable; a query with no matching row returns None.
    """

    gtfs_repository: IGtfsRepository

    def find(self, query: str) -> Stop | None:
        with self.gtfs_repository.open_stops() as table:
            return find_stop(table, query)

    def get(self, stop_id: str) -> Stop | None:
        found = self.get_many([stop_id])
        return found[0] if found else None

    def get_many(self, stop_ids: Iterable[str]) -> list[Stop]:
        with self.gtfs_repository.open_stops() as table:
            return find_stops_by_id(table, stop_ids)
