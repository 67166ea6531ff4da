from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, Sequence

from src.adapters.maps.folium_map_renderer import FoliumMapRenderer
from src.adapters.persistence.local_gtfs_repository import LocalGtfsRepository
from src.app.services.route_resolver import RouteResolver
from src.domain.exceptions import GtfsDataUnavailable
from src.domain.models import RouteResult, RouteStatus, Stop

PREVIEW_LINES = 10


def _prompt(text: str, input_fn: Callable[[str], str]) -> str | None:
    try:
        return input_fn(text).strip()
    except EOFError:
        return None


def _describe_stop(stop: Stop) -> str:
    line = f"Found stop: id={stop.id}"
    if stop.name:
        line += f" name={stop.name}"
    return line


def _print_endpoint(label: str, stop: Stop | None, query: str) -> None:
    print(f"\n{label}:")
    if stop is None:
        print(f"No matching stop found for '{query}'.")
    else:
        print(_describe_stop(stop))


def _print_route(result: RouteResult) -> None:
    if result.status is RouteStatus.DATA_UNAVAILABLE:
        print("\nNo GTFS data available.")
        return
    if not result.found:
        if result.origin and result.destination:
            print("\nNo single trip connects these stops.")
        return

    print(f"\nRoute (trip {result.trip_id}, {len(result.stops)} stops):")
    for n, stop in enumerate(result.stops, 1):
        print(f"  {n:>3}. {stop.id}  {stop.name}  ({stop.lat}, {stop.lon})")
    if result.total_distance_m is not None:
        print(f"Distance along stops: {result.total_distance_m / 1000.0:.2f} km")


def _print_preview(repo: LocalGtfsRepository) -> None:
    for name in (repo.stops_file, repo.stop_times_file):
        print(f"\n=== Reading {name} ===")
        try:
            rows = repo.preview(name, max_lines=PREVIEW_LINES)
        except GtfsDataUnavailable as exc:
            print(exc, file=sys.stderr)
            continue
        for fields in rows:
            print(" | ".join(fields))
        if len(rows) == PREVIEW_LINES:
            print(f"... (limiting output to {PREVIEW_LINES} lines)")


def main(
    args: Sequence[str] | None = None, input_fn: Callable[[str], str] = input
) -> int:
    parser = argparse.ArgumentParser(
        description="Find a transit trip between two GTFS stops and map it."
    )
    parser.add_argument(
        "--gtfs-dir",
        metavar="path",
        help="Directory with stops.csv and stop_times.csv"
        " (default: $GTFS_PATH or ./csv_files, searched in parent dirs too).",
    )
    parser.add_argument("--origin", help="Origin stop_id or name fragment.")
    parser.add_argument("--destination", help="Final stop_id or name fragment.")
    parser.add_argument(
        "-o",
        "--output",
        metavar="path",
        default=os.getenv("MAP_OUTPUT_PATH") or "route_map.html",
        help="Where to write the HTML map (default: %(default)s).",
    )
    parser.add_argument(
        "--no-map", action="store_true", help="Do not write the HTML map."
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the first lines of each data file and exit.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbose operation mode."
    )
    opts = parser.parse_args(args)

    logging.basicConfig(
        format="%(levelname)s :: %(name)s :: %(message)s",
        level=logging.DEBUG if opts.verbose else logging.WARNING,
    )

    repo = LocalGtfsRepository(base_path=opts.gtfs_dir)
    if opts.preview:
        _print_preview(repo)
        return 0

    origin_query = opts.origin
    if origin_query is None:
        origin_query = _prompt("Enter origin stop name or stop_id: ", input_fn)
        if origin_query is None:
            return 0
    if not origin_query:
        print("No origin provided. Exiting.")
        return 0

    destination_query = opts.destination
    if destination_query is None:
        destination_query = _prompt("Enter final stop name or stop_id: ", input_fn)
        if destination_query is None:
            return 0
    if not destination_query:
        print("No final stop provided. Exiting.")
        return 0

    result = RouteResolver(gtfs_repository=repo).find_route(
        origin_query, destination_query
    )
    if result.status is RouteStatus.DATA_UNAVAILABLE and result.origin is None:
        print("No GTFS data available.")
        return 0

    _print_endpoint("Origin Stop", result.origin, origin_query)
    if result.origin is not None:
        _print_endpoint("Final Stop", result.destination, destination_query)
    _print_route(result)

    if not opts.no_map and result.origin and result.destination:
        out = FoliumMapRenderer().save(result, opts.output)
        print(f"\nMap written to {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
