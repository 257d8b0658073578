"""JSON document persistence for maps and calendar tasks."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Callable, List, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.map import MapData
from ..models.task import Task
from .errors import MalformedDocumentError, StorageError
from .paths import AppPaths
from .seed import build_seed_maps

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAPS_ADAPTER: TypeAdapter[List[MapData]] = TypeAdapter(List[MapData])
TASKS_ADAPTER: TypeAdapter[List[Task]] = TypeAdapter(List[Task])


def dump_document(adapter: TypeAdapter[List[T]], items: List[T]) -> str:
    """Serialize a collection using the external camelCase field names."""
    payload = adapter.dump_python(items, mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _write_text(path: Path, text: str) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        raise StorageError(f"Failed to write {path.name}: {exc}") from exc


class DocumentStore:
    """Reads and writes the maps and calendar documents."""

    def __init__(self, paths: AppPaths, *, strict: bool = False) -> None:
        self.paths = paths
        self.strict = strict

    def load_maps(self) -> List[MapData]:
        """Load all maps, seeding the sample map on first run."""
        return self._load(self.paths.maps_file, MAPS_ADAPTER, build_seed_maps, self.save_maps)

    def load_tasks(self) -> List[Task]:
        """Load all calendar tasks, starting from an empty list on first run."""
        return self._load(self.paths.calendar_file, TASKS_ADAPTER, list, self.save_tasks)

    def save_maps(self, maps: List[MapData]) -> None:
        _write_text(self.paths.maps_file, dump_document(MAPS_ADAPTER, maps))
        logger.debug(f"Saved {len(maps)} maps to {self.paths.maps_file}")

    def save_tasks(self, tasks: List[Task]) -> None:
        _write_text(self.paths.calendar_file, dump_document(TASKS_ADAPTER, tasks))
        logger.debug(f"Saved {len(tasks)} tasks to {self.paths.calendar_file}")

    def _load(
        self,
        path: Path,
        adapter: TypeAdapter[List[T]],
        seed: Callable[[], List[T]],
        save: Callable[[List[T]], None],
    ) -> List[T]:
        if not path.exists():
            items = seed()
            save(items)
            logger.info(f"Created {path.name} with {len(items)} seed entries")
            return items

        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Failed to read {path.name}: {exc}") from exc

        try:
            return adapter.validate_json(raw)
        except ValidationError as exc:
            if self.strict:
                raise MalformedDocumentError(f"{path.name} is not a valid document: {exc}") from exc
            logger.warning(f"Ignoring unreadable {path.name}, starting empty: {exc}")
            return []


__all__ = ["DocumentStore", "dump_document", "MAPS_ADAPTER", "TASKS_ADAPTER"]
