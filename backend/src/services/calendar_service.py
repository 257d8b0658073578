"""Calendar task operations."""

from __future__ import annotations

import logging
from typing import List
import uuid

from ..models.task import Task, TaskCreate
from .errors import NotFoundError
from .state import AppState

logger = logging.getLogger(__name__)


class CalendarService:
    """Service for the flat list of calendar tasks."""

    def __init__(self, state: AppState):
        self.state = state

    def get_tasks(self) -> List[Task]:
        return self.state.tasks()

    def get_all_events(self) -> List[Task]:
        """Return every calendar event (same collection as get_tasks)."""
        return self.get_tasks()

    def save_tasks(self, tasks: List[Task]) -> None:
        """Replace the whole task collection."""
        with self.state.edit_tasks() as current:
            current[:] = list(tasks)
        logger.info(f"Saved task list with {len(tasks)} tasks")

    def add_event(self, event: TaskCreate) -> Task:
        """Append a new task with a generated id."""
        logger.debug(f"Received new event: {event!r}")
        new_event = Task(id=str(uuid.uuid4()), **event.model_dump(exclude={"id"}))
        with self.state.edit_tasks() as tasks:
            tasks.append(new_event)
        logger.info(f"Added event {new_event.id} ({new_event.title!r})")
        return new_event

    def update_event(self, event: Task) -> Task:
        """
        Replace the task carrying the same id.

        Raises NotFoundError if no task has this id.
        """
        with self.state.edit_tasks() as tasks:
            for index, task in enumerate(tasks):
                if task.id == event.id:
                    tasks[index] = event
                    break
            else:
                raise NotFoundError("Event not found")
        logger.info(f"Updated event {event.id}")
        return event

    def delete_event(self, event_id: str) -> bool:
        """Remove a task and report whether anything was removed."""
        with self.state.edit_tasks() as tasks:
            initial_len = len(tasks)
            tasks[:] = [task for task in tasks if task.id != event_id]
            removed = len(tasks) < initial_len
        logger.info(f"Deleted event {event_id}: removed={removed}")
        return removed


__all__ = ["CalendarService"]
