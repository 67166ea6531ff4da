from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.routes import router as routes_router
from src.adapters.api.controllers.stops import router as stops_router
from src.domain.exceptions import GtfsDataUnavailable, RoutingError

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title="StopRoute")
app.include_router(stops_router)
app.include_router(routes_router)


def _reveal_errors() -> bool:
    flag = (os.getenv("STOPROUTE_REVEAL_ERRORS") or "").strip().lower()
    return flag in {"1", "true", "yes", "on"}


@app.exception_handler(RoutingError)
async def routing_error_handler(request: Request, exc: RoutingError) -> JSONResponse:
    """Lookup failures that escaped a service: missing data is a 503."""

    logger.warning("Route lookup failed on %s: %s", request.url.path, exc)
    status_code = 503 if isinstance(exc, GtfsDataUnavailable) else 404
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    logger.exception("Unhandled exception", extra={"path": str(request.url.path)})
    detail = (str(exc) or exc.__class__.__name__) if _reveal_errors() else None
    return JSONResponse(
        status_code=500, content={"detail": detail or "Internal Server Error"}
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
