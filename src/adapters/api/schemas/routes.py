from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class StopSchema(BaseModel):
    id: str
    name: str
    lat: float
    lon: float
    description: str | None = None


class RouteSchema(BaseModel):
    status: Literal[
        "found",
        "origin_not_found",
        "destination_not_found",
        "no_common_trip",
        "data_unavailable",
    ]
    origin: StopSchema | None = None
    destination: StopSchema | None = None
    stops: list[StopSchema] = []
    trip_id: str | None = None

    total_distance_m: float | None = None
