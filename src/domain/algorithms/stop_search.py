from __future__ import annotations

import logging
from typing import Iterable

from src.domain.models import Stop

from .csv_table import CsvTable, Row

logger = logging.getLogger(__name__)


def _parse_coordinate(raw: str | None) -> float:
    if raw is None:
        return 0.0
    try:
        return float(raw)
    except ValueError:
        logger.debug("Unparseable coordinate %r, defaulting to 0.0", raw)
        return 0.0


def stop_from_row(table: CsvTable, row: Row) -> Stop:
    desc = table.get(row, "stop_desc")
    return Stop(
        id=table.get(row, "stop_id") or "",
        name=table.get(row, "stop_name") or "",
        lat=_parse_coordinate(table.get(row, "stop_lat")),
        lon=_parse_coordinate(table.get(row, "stop_lon")),
        description=desc or None,
    )


def find_stop(table: CsvTable, query: str) -> Stop | None:
    """Single pass: exact stop_id match, else case-insensitive name substring.

    Both checks run on each row before moving on, so the first row matching
    either way wins.
    """

    query = query.strip()
    if not query:
        return None

    q_lower = query.lower()
    for row in table.rows():
        if table.get(row, "stop_id") == query:
            return stop_from_row(table, row)

        name = table.get(row, "stop_name")
        if name is not None and q_lower in name.lower():
            return stop_from_row(table, row)

    return None


def find_stops_by_id(table: CsvTable, stop_ids: Iterable[str]) -> list[Stop]:
    """Exact-id lookup of several stops in one pass, in requested order.

    Ids with no row are skipped. The first row for a repeated id wins.
    """

    wanted = list(stop_ids)
    pending = set(wanted)
    found: dict[str, Stop] = {}
    for row in table.rows():
        if not pending:
            break
        stop_id = table.get(row, "stop_id")
        if stop_id in pending:
            found[stop_id] = stop_from_row(table, row)
            pending.discard(stop_id)

    return [found[s] for s in wanted if s in found]
