from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TripStopEntry:
    trip_id: str
    stop_id: str
    sequence: int


@dataclass(frozen=True, slots=True)
class TripStopSequence:
    """Stop-time entries of one contiguous run of a trip, in file order."""

    trip_id: str
    entries: tuple[TripStopEntry, ...] = field(default_factory=tuple)

    @property
    def stop_ids(self) -> tuple[str, ...]:
        return tuple(e.stop_id for e in self.entries)

    def serves(self, *stop_ids: str) -> bool:
        present = set(self.stop_ids)
        return all(s in present for s in stop_ids)

    def sorted(self) -> TripStopSequence:
        # sorted() is stable: equal sequence numbers keep file order.
        return TripStopSequence(
            trip_id=self.trip_id,
            entries=tuple(sorted(self.entries, key=lambda e: e.sequence)),
        )

    def slice_between(self, origin_id: str, destination_id: str) -> tuple[str, ...]:
        """Stop ids from origin to destination (inclusive), in entry order.

        The destination must appear at or after the origin: a run serving the
        pair in the opposite direction yields an empty tuple.
        """

        ids = self.stop_ids
        try:
            start = ids.index(origin_id)
            end = ids.index(destination_id, start)
        except ValueError:
            return ()
        return ids[start : end + 1]
