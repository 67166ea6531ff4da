from __future__ import annotations

import pytest

from src.domain.algorithms.csv_table import STOP_TIME_COLUMNS, CsvTable
from src.domain.algorithms.trip_scan import find_trip_run, route_stop_ids
from src.domain.models import TripStopEntry, TripStopSequence


def _table(text: str) -> CsvTable:
    return CsvTable.from_lines(text.splitlines(keepends=True), STOP_TIME_COLUMNS)


HEADER = "trip_id,arrival_time,departure_time,stop_id,stop_sequence\n"


def test_orders_by_sequence_and_slices_between_stops() -> None:
    text = HEADER + (
        "T1,08:10:00,08:10:00,A,3\n"
        "T1,08:00:00,08:00:00,B,1\n"
        "T1,08:05:00,08:05:00,C,2\n"
    )

    trip_id, stop_ids = route_stop_ids(_table(text), "B", "C")

    assert trip_id == "T1"
    assert stop_ids == ["B", "C"]


def test_reverse_direction_yields_empty_result() -> None:
    text = HEADER + "T1,,,A,1\nT1,,,B,2\n"

    trip_id, stop_ids = route_stop_ids(_table(text), "B", "A")

    # The run serves both stops, but only forward slicing is allowed.
    assert trip_id == "T1"
    assert stop_ids == []


def test_skips_trip_lacking_destination() -> None:
    text = HEADER + (
        "T1,,,A,1\n"
        "T1,,,X,2\n"
        "T2,,,A,1\n"
        "T2,,,M,2\n"
        "T2,,,D,3\n"
    )

    trip_id, stop_ids = route_stop_ids(_table(text), "A", "D")

    assert trip_id == "T2"
    assert stop_ids == ["A", "M", "D"]


def test_first_qualifying_run_wins() -> None:
    text = HEADER + (
        "T1,,,A,1\nT1,,,B,2\nT1,,,C,3\n"
        "T2,,,A,1\nT2,,,C,2\n"
    )

    trip_id, stop_ids = route_stop_ids(_table(text), "A", "C")

    assert trip_id == "T1"
    assert stop_ids == ["A", "B", "C"]


def test_trailing_run_is_evaluated_at_end_of_scan() -> None:
    text = HEADER + "T1,,,X,1\nT1,,,Y,2\nT9,,,A,1\nT9,,,D,2\n"

    run = find_trip_run(_table(text), "A", "D")

    assert run is not None
    assert run.trip_id == "T9"


def test_non_contiguous_blocks_of_a_trip_are_separate_runs() -> None:
    text = HEADER + (
        "T1,,,A,1\n"
        "T2,,,Q,1\n"
        "T1,,,D,2\n"
    )

    trip_id, stop_ids = route_stop_ids(_table(text), "A", "D")

    assert trip_id is None
    assert stop_ids == []


def test_non_numeric_sequence_defaults_to_zero_and_scan_continues() -> None:
    text = HEADER + (
        "T1,,,A,2\n"
        "T1,,,B,first\n"
        "T1,,,C,3\n"
        "T2,,,E,1\n"
    )

    run = find_trip_run(_table(text), "B", "C")

    assert run is not None
    assert [e.sequence for e in run.entries] == [2, 0, 3]
    assert run.sorted().stop_ids == ("B", "A", "C")
    assert route_stop_ids(_table(text), "B", "C") == ("T1", ["B", "A", "C"])


def test_rows_without_trip_or_stop_are_skipped() -> None:
    text = HEADER + "T1,,,A,1\n,,,B,2\nT1,,,,3\nT1,,,C,4\n"

    assert route_stop_ids(_table(text), "A", "C") == ("T1", ["A", "C"])


def test_equal_sequences_keep_file_order() -> None:
    seq = TripStopSequence(
        trip_id="T",
        entries=(
            TripStopEntry("T", "B", 2),
            TripStopEntry("T", "A", 1),
            TripStopEntry("T", "C", 1),
        ),
    )

    assert seq.sorted().stop_ids == ("A", "C", "B")


@pytest.mark.parametrize(
    ("origin", "destination", "expected"),
    [
        ("A", "A", ("A",)),
        ("A", "C", ("A", "B", "C")),
        ("B", "B2", ()),
        ("C", "A", ()),
    ],
)
def test_slice_between(origin: str, destination: str, expected: tuple) -> None:
    seq = TripStopSequence(
        trip_id="T",
        entries=tuple(
            TripStopEntry("T", s, n) for n, s in enumerate(["A", "B", "C"], 1)
        ),
    )

    assert seq.slice_between(origin, destination) == expected


def test_slice_uses_first_destination_at_or_after_origin() -> None:
    seq = TripStopSequence(
        trip_id="T",
        entries=tuple(
            TripStopEntry("T", s, n)
            for n, s in enumerate(["A", "B", "A", "C", "B"], 1)
        ),
    )

    assert seq.slice_between("B", "A") == ("B", "A")
    assert seq.slice_between("A", "B") == ("A", "B")


def test_resolution_is_idempotent() -> None:
    text = HEADER + "T1,,,A,3\nT1,,,B,1\nT1,,,C,2\n"

    first = route_stop_ids(_table(text), "B", "A")
    second = route_stop_ids(_table(text), "B", "A")

    assert first == second == ("T1", ["B", "C", "A"])


def test_missing_sequence_column_keeps_file_order() -> None:
    text = "trip_id,stop_id\nT1,A\nT1,B\nT1,C\n"

    assert route_stop_ids(_table(text), "A", "C") == ("T1", ["A", "B", "C"])


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("7", 7), (" 12 ", 12), ("1_0", 0), ("3.0", 0), ("-1", 0), ("²", 0), ("", 0)],
)
def test_sequence_accepts_plain_digits_only(raw: str, expected: int) -> None:
    text = HEADER + f"T1,,,A,{raw}\n"

    run = find_trip_run(_table(text), "A", "A")

    assert run is not None
    assert run.entries[0].sequence == expected
