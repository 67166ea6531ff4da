from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Stop:
    """A row of stops.csv.

    Coordinates are kept as parsed; they are not range-checked.
    """

    id: str
    name: str
    lat: float
    lon: float
    description: str | None = None
