"""Guarded in-memory working copy of the persisted documents."""

from __future__ import annotations

from contextlib import contextmanager
import logging
import threading
from typing import Iterator, List

from ..models.map import MapData
from ..models.task import Task
from .document_store import DocumentStore

logger = logging.getLogger(__name__)


class AppState:
    """
    Authoritative maps and tasks shared by all request handlers.

    Every access goes through one exclusive lock. Mutations run as
    read-modify-write transactions: the edited list replaces the current one
    only after it was written to disk, so a failed save leaves memory and
    disk in agreement.
    """

    def __init__(self, store: DocumentStore) -> None:
        self.store = store
        self._lock = threading.Lock()
        self._maps: List[MapData] = store.load_maps()
        self._tasks: List[Task] = store.load_tasks()
        logger.info(f"Loaded {len(self._maps)} maps and {len(self._tasks)} tasks")

    def maps(self) -> List[MapData]:
        """Return a snapshot of the map collection."""
        with self._lock:
            return list(self._maps)

    def tasks(self) -> List[Task]:
        """Return a snapshot of the task collection."""
        with self._lock:
            return list(self._tasks)

    @contextmanager
    def edit_maps(self) -> Iterator[List[MapData]]:
        """
        Yield a working copy of the maps and persist it when the block exits.

        Replace elements of the yielded list instead of mutating them; the
        models are shared with the committed state.
        """
        with self._lock:
            working = list(self._maps)
            yield working
            self.store.save_maps(working)
            self._maps = working

    @contextmanager
    def edit_tasks(self) -> Iterator[List[Task]]:
        """Yield a working copy of the tasks and persist it when the block exits."""
        with self._lock:
            working = list(self._tasks)
            yield working
            self.store.save_tasks(working)
            self._tasks = working


__all__ = ["AppState"]
