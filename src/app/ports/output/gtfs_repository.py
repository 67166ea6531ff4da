from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from src.domain.algorithms.csv_table import CsvTable


class IGtfsRepository(ABC):
    """Port for scanning GTFS tables.

    Each call opens its own scan; the handle is released when the context
    exits. Implementations raise GtfsDataUnavailable when a file is missing.
    """

    @abstractmethod
    def open_stops(self) -> AbstractContextManager[CsvTable]:
        raise NotImplementedError

    @abstractmethod
    def open_stop_times(self) -> AbstractContextManager[CsvTable]:
        raise NotImplementedError
