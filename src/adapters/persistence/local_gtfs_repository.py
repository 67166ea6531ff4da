from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterator, Sequence, TextIO

from src.app.ports.output import IGtfsRepository
from src.domain.algorithms.csv_table import (
    STOP_COLUMNS,
    STOP_TIME_COLUMNS,
    CsvTable,
    split_line,
)
from src.domain.exceptions import GtfsDataUnavailable

from .file_discovery import locate_gtfs_file

logger = logging.getLogger(__name__)

STOPS_FILE = "stops.csv"
STOP_TIMES_FILE = "stop_times.csv"


@dataclass(slots=True)
class LocalGtfsRepository(IGtfsRepository):
    """Reads GTFS tables from a directory of .csv (or .txt) files.

    Env vars:
      - GTFS_PATH: directory containing stops.csv and stop_times.csv
      - GTFS_SEARCH_LEVELS: parent directories to search when not found
    """

    base_path: str | Path | None = None
    stops_file: str = STOPS_FILE
    stop_times_file: str = STOP_TIMES_FILE

    def _base(self) -> Path:
        value = self.base_path or os.getenv("GTFS_PATH") or "csv_files"
        return Path(value)

    def resolve(self, name: str) -> Path:
        base = self._base()
        candidates = [base / name]
        # GTFS feeds ship .txt files; accept either extension.
        stem, suffix = os.path.splitext(name)
        if suffix == ".csv":
            candidates.append(base / f"{stem}.txt")

        for candidate in candidates:
            found = locate_gtfs_file(candidate)
            if found is not None:
                return found

        logger.warning("GTFS file %s not found under %s", name, base)
        raise GtfsDataUnavailable(name, f"not found under {base}")

    def _open_file(self, name: str) -> TextIO:
        path = self.resolve(name)
        try:
            # Undecodable bytes (e.g. latin-1 feeds) become U+FFFD.
            return path.open("r", encoding="utf-8-sig", errors="replace", newline="")
        except OSError as exc:
            logger.warning("Opening %s failed: %s", path, exc)
            raise GtfsDataUnavailable(name, str(exc)) from exc

    @contextmanager
    def _open(self, name: str, columns: Sequence[str]) -> Iterator[CsvTable]:
        with self._open_file(name) as fp:
            yield CsvTable.from_lines(fp, columns)

    def open_stops(self):
        return self._open(self.stops_file, STOP_COLUMNS)

    def open_stop_times(self):
        return self._open(self.stop_times_file, STOP_TIME_COLUMNS)

    def preview(self, name: str, max_lines: int = 10) -> list[list[str]]:
        """First lines of a data file, split on commas (header included)."""

        with self._open_file(name) as fp:
            return [split_line(line) for line in islice(fp, max_lines)]
