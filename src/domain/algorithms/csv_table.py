from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

STOP_COLUMNS = ("stop_id", "stop_name", "stop_desc", "stop_lat", "stop_lon")
STOP_TIME_COLUMNS = ("trip_id", "stop_id", "stop_sequence")

Row = list[str]


def strip_line(line: str) -> str:
    return line.rstrip("\r\n")


def split_line(line: str) -> Row:
    # Naive split: quoted fields containing commas are not supported.
    return strip_line(line).split(",")


@dataclass(slots=True)
class CsvTable:
    """Header-indexed view over the lines of a comma-delimited file.

    Rows are parsed lazily, one per iteration step, so a scan can stop early
    without reading the rest of the source.
    """

    column_index: dict[str, int | None]
    _lines: Iterator[str] = field(repr=False)

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], columns: Sequence[str] = ()
    ) -> CsvTable:
        it = iter(lines)
        header_line = next(it, None)
        header = split_line(header_line) if header_line is not None else []

        index: dict[str, int | None] = {name: None for name in columns}
        for pos, name in enumerate(header):
            if index.get(name) is None:
                index[name] = pos
        return cls(column_index=index, _lines=it)

    def has_column(self, column: str) -> bool:
        return self.column_index.get(column) is not None

    def get(self, row: Row, column: str) -> str | None:
        """Field value, or None when the column or the field is absent."""

        pos = self.column_index.get(column)
        if pos is None or pos >= len(row):
            return None
        return row[pos]

    def rows(self) -> Iterator[Row]:
        for line in self._lines:
            if not strip_line(line):
                continue
            yield split_line(line)

    def __iter__(self) -> Iterator[Row]:
        return self.rows()
