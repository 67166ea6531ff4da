from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.domain.models import TripStopEntry, TripStopSequence

from .csv_table import CsvTable

logger = logging.getLogger(__name__)


def _parse_sequence(raw: str | None) -> int:
    value = (raw or "").strip()
    if not (value.isascii() and value.isdigit()):
        if raw is not None:
            logger.debug("Unparseable stop_sequence %r, defaulting to 0", raw)
        return 0
    return int(value)


@dataclass(slots=True)
class _RunAccumulator:
    """Scan state: the trip id being tracked and its entries so far."""

    trip_id: str | None = None
    entries: list[TripStopEntry] = field(default_factory=list)

    def flush(self) -> TripStopSequence | None:
        if self.trip_id is None or not self.entries:
            return None
        run = TripStopSequence(trip_id=self.trip_id, entries=tuple(self.entries))
        self.entries = []
        return run

    def start(self, trip_id: str) -> None:
        self.trip_id = trip_id
        self.entries = []


def find_trip_run(
    table: CsvTable, origin_id: str, destination_id: str
) -> TripStopSequence | None:
    """First contiguous run of stop_times rows serving both stops.

    Rows are grouped by consecutive identical trip_id, not by a full
    group-by: a trip split over two blocks of the file is two candidate runs.
    """

    acc = _RunAccumulator()
    for row in table.rows():
        trip_id = table.get(row, "trip_id")
        stop_id = table.get(row, "stop_id")
        if not trip_id or not stop_id:
            continue

        if trip_id != acc.trip_id:
            run = acc.flush()
            if run is not None and run.serves(origin_id, destination_id):
                return run
            acc.start(trip_id)

        acc.entries.append(
            TripStopEntry(
                trip_id=trip_id,
                stop_id=stop_id,
                sequence=_parse_sequence(table.get(row, "stop_sequence")),
            )
        )

    # The last run never sees a trip change; evaluate it here.
    run = acc.flush()
    if run is not None and run.serves(origin_id, destination_id):
        return run
    return None


def route_stop_ids(
    table: CsvTable, origin_id: str, destination_id: str
) -> tuple[str | None, list[str]]:
    """Return (trip_id, ordered stop ids from origin to destination).

    The list is empty when no run serves both stops or when the destination
    comes before the origin in the chosen run.
    """

    run = find_trip_run(table, origin_id, destination_id)
    if run is None:
        return None, []
    return run.trip_id, list(run.sorted().slice_between(origin_id, destination_id))
