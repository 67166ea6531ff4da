from __future__ import annotations

from src.domain.models import RouteResult, RouteStatus, Stop

A = Stop(id="A", name="A", lat=0.0, lon=0.0)
B = Stop(id="B", name="B", lat=0.0, lon=0.5)
C = Stop(id="C", name="C", lat=0.0, lon=1.0)


def test_path_is_route_stops_when_found() -> None:
    r = RouteResult(
        status=RouteStatus.FOUND, origin=A, destination=C, stops=(A, B, C), trip_id="T"
    )

    assert r.found
    assert r.path == (A, B, C)


def test_path_falls_back_to_direct_hop() -> None:
    r = RouteResult(status=RouteStatus.NO_COMMON_TRIP, origin=A, destination=C)

    assert not r.found
    assert r.path == (A, C)


def test_distance_via_intermediate_equals_direct_on_a_straight_line() -> None:
    via = RouteResult(
        status=RouteStatus.FOUND, origin=A, destination=C, stops=(A, B, C)
    )
    direct = RouteResult(status=RouteStatus.NO_COMMON_TRIP, origin=A, destination=C)

    assert abs(via.total_distance_m - direct.total_distance_m) < 1e-6


def test_distance_is_none_without_two_points() -> None:
    assert RouteResult(status=RouteStatus.ORIGIN_NOT_FOUND).total_distance_m is None
    assert (
        RouteResult(status=RouteStatus.DESTINATION_NOT_FOUND, origin=A).total_distance_m
        is None
    )
