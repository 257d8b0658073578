"""HTTP API routes for calendar tasks and events."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from ...models.task import Task, TaskCreate
from ...services.calendar_service import CalendarService
from ..dependencies import get_calendar_service

router = APIRouter(prefix="/api")

CalendarServiceDep = Annotated[CalendarService, Depends(get_calendar_service)]


@router.get("/tasks", response_model=list[Task], response_model_exclude_none=True)
def get_tasks(service: CalendarServiceDep):
    """List all tasks."""
    return service.get_tasks()


@router.put("/tasks", status_code=status.HTTP_204_NO_CONTENT)
def save_tasks(tasks: list[Task], service: CalendarServiceDep) -> Response:
    """Replace the whole task list."""
    service.save_tasks(tasks)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/events", response_model=list[Task], response_model_exclude_none=True)
def get_all_events(service: CalendarServiceDep):
    """List all calendar events."""
    return service.get_all_events()


@router.post(
    "/events",
    response_model=Task,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def add_event(event: TaskCreate, service: CalendarServiceDep):
    """Add a calendar event with a generated id."""
    return service.add_event(event)


@router.put("/events", response_model=Task, response_model_exclude_none=True)
def update_event(event: Task, service: CalendarServiceDep):
    """Replace an existing calendar event."""
    return service.update_event(event)


@router.delete("/events/{event_id}", response_model=bool)
def delete_event(event_id: str, service: CalendarServiceDep) -> bool:
    """Delete a calendar event; returns whether it existed."""
    return service.delete_event(event_id)
