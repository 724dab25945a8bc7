"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core import AnnotatorTrackerError
from .routers import ALL_ROUTERS


def register_routes(app: FastAPI) -> None:
    """Attach all application routers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)


async def _handle_tracker_error(request: Request, exc: AnnotatorTrackerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Translate domain errors into ``{"detail": ...}`` responses."""

    app.add_exception_handler(AnnotatorTrackerError, _handle_tracker_error)


__all__ = ["register_error_handlers", "register_routes"]
