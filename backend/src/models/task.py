"""Calendar task models."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import ConfigDict, Field

from .map import CamelModel

# The calendar page sends "low" | "medium" | "high"; the map panels send 1-3.
Importance = Union[int, str]


class TaskCreate(CamelModel):
    """Request payload to add a calendar event (a task without an id)."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Pay rent",
                "dueDate": "2025-07-01",
                "isCompleted": False,
                "isUndated": False,
                "importance": "medium",
            }
        }
    )

    title: str
    description: Optional[str] = None
    due_date: Optional[str] = Field(None, description="Due date in YYYY-MM-DD format")
    is_completed: bool = False
    is_undated: bool = False
    importance: Optional[Importance] = Field(None, description="Importance level, stored as sent")


class Task(CamelModel):
    """A persisted calendar task."""

    id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[str] = Field(None, description="Due date in YYYY-MM-DD format")
    is_completed: bool = False
    is_undated: bool = False
    importance: Optional[Importance] = None


__all__ = ["TaskCreate", "Task", "Importance"]
