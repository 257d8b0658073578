"""Request-scoped accessors for the application's shared services."""

from __future__ import annotations

from fastapi import HTTPException, Request

from ..services.calendar_service import CalendarService
from ..services.file_staging import FileStagingService
from ..services.map_service import MapService
from ..services.state import AppState


def get_app_state(request: Request) -> AppState:
    state: AppState | None = getattr(request.app.state, "data", None)
    if state is None:
        raise HTTPException(status_code=500, detail="Application state not initialized")
    return state


def get_map_service(request: Request) -> MapService:
    return MapService(get_app_state(request))


def get_calendar_service(request: Request) -> CalendarService:
    return CalendarService(get_app_state(request))


def get_file_staging(request: Request) -> FileStagingService:
    staging: FileStagingService | None = getattr(request.app.state, "file_staging", None)
    if staging is None:
        raise HTTPException(status_code=500, detail="File staging not initialized")
    return staging


__all__ = ["get_app_state", "get_map_service", "get_calendar_service", "get_file_staging"]
