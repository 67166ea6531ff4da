from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from src.adapters.api.controllers.stops import stop_to_schema
from src.adapters.api.dependencies import get_map_renderer, get_route_resolver
from src.adapters.api.schemas.routes import RouteSchema
from src.app.ports.output import IMapRenderer
from src.app.services.route_resolver import RouteResolver
from src.domain.models import RouteResult, RouteStatus

router = APIRouter(tags=["routes"])

_NOT_FOUND = {
    RouteStatus.ORIGIN_NOT_FOUND,
    RouteStatus.DESTINATION_NOT_FOUND,
    RouteStatus.NO_COMMON_TRIP,
}


def _route_to_schema(result: RouteResult) -> RouteSchema:
    return RouteSchema(
        status=result.status.value,
        origin=stop_to_schema(result.origin) if result.origin else None,
        destination=(
            stop_to_schema(result.destination) if result.destination else None
        ),
        stops=[stop_to_schema(s) for s in result.stops],
        trip_id=result.trip_id,
        total_distance_m=result.total_distance_m if result.found else None,
    )


def _raise_for_status(result: RouteResult, *, allow_no_trip: bool = False) -> None:
    if result.status is RouteStatus.DATA_UNAVAILABLE:
        raise HTTPException(status_code=503, detail="GTFS data unavailable")
    if result.status is RouteStatus.NO_COMMON_TRIP and allow_no_trip:
        return
    if result.status in _NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.status.value)


@router.get("/routes", response_model=RouteSchema)
def find_route(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    resolver: RouteResolver = Depends(get_route_resolver),
) -> RouteSchema:
    result = resolver.find_route(origin, destination)
    _raise_for_status(result)
    return _route_to_schema(result)


@router.get("/routes/map", response_class=HTMLResponse)
def route_map(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    resolver: RouteResolver = Depends(get_route_resolver),
    renderer: IMapRenderer = Depends(get_map_renderer),
) -> HTMLResponse:
    result = resolver.find_route(origin, destination)
    # Without a common trip the map still shows the direct line.
    _raise_for_status(result, allow_no_trip=True)
    return HTMLResponse(content=renderer.render(result))
