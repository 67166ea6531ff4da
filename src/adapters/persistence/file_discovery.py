from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LEVELS = 6

# Project checkout root; searched when the working directory is elsewhere.
INSTALL_DIR = Path(__file__).resolve().parents[3]


def _strip_dot_prefix(relative: str | Path) -> Path:
    raw = str(relative)
    if raw.startswith(("./", ".\\")):
        raw = raw[2:]
    return Path(raw)


def find_file_in_ancestors(
    relative: str | Path,
    *,
    start: str | Path | None = None,
    max_levels: int = DEFAULT_SEARCH_LEVELS,
) -> Path | None:
    """Look for `relative` under `start` and up to `max_levels` of its parents."""

    rel = _strip_dot_prefix(relative)
    base = Path(start) if start is not None else Path.cwd()
    base = base.resolve()

    candidates = [base, *base.parents][: max_levels + 1]
    for directory in candidates:
        candidate = directory / rel
        if candidate.is_file():
            return candidate
    return None


def search_levels_from_env() -> int:
    raw = (os.getenv("GTFS_SEARCH_LEVELS") or "").strip()
    if not raw:
        return DEFAULT_SEARCH_LEVELS
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning("Ignoring invalid GTFS_SEARCH_LEVELS=%r", raw)
        return DEFAULT_SEARCH_LEVELS


def locate_gtfs_file(
    relative: str | Path,
    *,
    search_roots: Iterable[str | Path] | None = None,
    max_levels: int | None = None,
) -> Path | None:
    """Resolve a data file path.

    Tries the path as given, then an ancestor search from each search root
    (the working directory, then the install directory, by default).
    """

    direct = Path(relative)
    if direct.is_file():
        return direct

    if direct.is_absolute():
        return None

    levels = search_levels_from_env() if max_levels is None else max_levels
    roots = list(search_roots) if search_roots is not None else [Path.cwd(), INSTALL_DIR]
    for root in roots:
        found = find_file_in_ancestors(relative, start=root, max_levels=levels)
        if found is not None:
            logger.info("Found %s at %s", relative, found)
            return found
    return None
