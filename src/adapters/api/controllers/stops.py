from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import get_stop_index
from src.adapters.api.schemas.routes import StopSchema
from src.app.services.stop_index import StopIndex
from src.domain.exceptions import GtfsDataUnavailable
from src.domain.models import Stop

router = APIRouter(prefix="/stops", tags=["stops"])


def stop_to_schema(stop: Stop) -> StopSchema:
    return StopSchema(
        id=stop.id,
        name=stop.name,
        lat=stop.lat,
        lon=stop.lon,
        description=stop.description,
    )


@router.get("/search", response_model=StopSchema)
def search_stop(
    q: str = Query(..., min_length=1),
    index: StopIndex = Depends(get_stop_index),
) -> StopSchema:
    try:
        stop = index.find(q)
    except GtfsDataUnavailable as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    if stop is None:
        raise HTTPException(status_code=404, detail=f"No matching stop found for '{q}'")
    return stop_to_schema(stop)
