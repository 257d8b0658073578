import json
from pathlib import Path

import pytest

from backend.src.models.task import Task, TaskCreate
from backend.src.services.calendar_service import CalendarService
from backend.src.services.config import AppConfig
from backend.src.services.document_store import DocumentStore
from backend.src.services.errors import NotFoundError
from backend.src.services.paths import AppPaths, resolve_paths
from backend.src.services.state import AppState


@pytest.fixture
def paths(tmp_path: Path) -> AppPaths:
    return resolve_paths(AppConfig(data_dir=tmp_path / "data", cache_dir=tmp_path / "cache"))


@pytest.fixture
def service(paths: AppPaths) -> CalendarService:
    return CalendarService(AppState(DocumentStore(paths)))


def _tasks_on_disk(paths: AppPaths) -> list:
    return json.loads(paths.calendar_file.read_text(encoding="utf-8"))


def test_add_event_generates_id_and_persists(service: CalendarService, paths: AppPaths) -> None:
    created = service.add_event(TaskCreate(title="Pay rent", is_completed=False, is_undated=False))

    assert created.id
    assert created.title == "Pay rent"
    assert service.get_all_events() == [created]
    on_disk = _tasks_on_disk(paths)
    assert on_disk == [
        {"id": created.id, "title": "Pay rent", "isCompleted": False, "isUndated": False}
    ]


def test_add_event_ids_are_unique(service: CalendarService) -> None:
    first = service.add_event(TaskCreate(title="A"))
    second = service.add_event(TaskCreate(title="A"))

    assert first.id != second.id


def test_get_all_events_matches_get_tasks(service: CalendarService) -> None:
    service.add_event(TaskCreate(title="Dentist", due_date="2025-03-04", importance=2))

    assert service.get_all_events() == service.get_tasks()


def test_save_tasks_replaces_collection(service: CalendarService, paths: AppPaths) -> None:
    service.add_event(TaskCreate(title="Old"))
    replacement = [
        Task(id="x", title="New", is_completed=True, is_undated=True),
        Task(id="y", title="Newer", due_date="2025-01-01"),
    ]

    service.save_tasks(replacement)

    assert service.get_tasks() == replacement
    assert [t["id"] for t in _tasks_on_disk(paths)] == ["x", "y"]


def test_update_event_replaces_matching_task(service: CalendarService, paths: AppPaths) -> None:
    created = service.add_event(TaskCreate(title="Draft"))
    changed = created.model_copy(update={"title": "Final", "is_completed": True})

    result = service.update_event(changed)

    assert result == changed
    assert service.get_tasks() == [changed]
    assert _tasks_on_disk(paths)[0]["isCompleted"] is True


def test_update_unknown_event_raises(service: CalendarService, paths: AppPaths) -> None:
    service.add_event(TaskCreate(title="Keep"))
    before = paths.calendar_file.read_text(encoding="utf-8")

    with pytest.raises(NotFoundError) as excinfo:
        service.update_event(Task(id="missing", title="Ghost"))

    assert excinfo.value.message == "Event not found"
    assert paths.calendar_file.read_text(encoding="utf-8") == before


def test_delete_event_reports_removal(service: CalendarService) -> None:
    keep = service.add_event(TaskCreate(title="Keep"))
    drop = service.add_event(TaskCreate(title="Drop"))

    assert service.delete_event(drop.id) is True
    assert service.get_tasks() == [keep]

    assert service.delete_event(drop.id) is False
    assert service.get_tasks() == [keep]
