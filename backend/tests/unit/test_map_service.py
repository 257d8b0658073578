import json
from pathlib import Path

import pytest

from backend.src.models.map import Connection, Node, Position
from backend.src.services.config import AppConfig
from backend.src.services.document_store import DocumentStore
from backend.src.services.errors import NotFoundError
from backend.src.services.map_service import MapService
from backend.src.services.paths import AppPaths, resolve_paths
from backend.src.services.state import AppState


@pytest.fixture
def paths(tmp_path: Path) -> AppPaths:
    return resolve_paths(AppConfig(data_dir=tmp_path / "data", cache_dir=tmp_path / "cache"))


@pytest.fixture
def service(paths: AppPaths) -> MapService:
    return MapService(AppState(DocumentStore(paths)))


def _maps_on_disk(paths: AppPaths) -> list:
    return json.loads(paths.maps_file.read_text(encoding="utf-8"))


def test_get_maps_returns_seed_on_fresh_directory(service: MapService) -> None:
    maps = service.get_maps()

    assert [m.id for m in maps] == ["1"]
    assert len(maps[0].nodes) == 2
    assert len(maps[0].connections) == 1


def test_create_map_appends_empty_map(service: MapService, paths: AppPaths) -> None:
    first = service.create_map("Ideas")
    second = service.create_map("Ideas")

    assert first.name == "Ideas"
    assert first.nodes == [] and first.connections == []
    assert first.id != second.id
    assert [m.id for m in service.get_maps()] == ["1", first.id, second.id]
    assert [m["id"] for m in _maps_on_disk(paths)] == ["1", first.id, second.id]


def test_get_map_returns_none_for_unknown_id(service: MapService) -> None:
    assert service.get_map("missing") is None
    assert service.get_map("1").name == "Getting Started"


def test_update_map_replaces_graph(service: MapService, paths: AppPaths) -> None:
    created = service.create_map("Graph")
    nodes = [
        Node(id="a", position=Position(x=0, y=0), title="A", links=["b", "dangling"]),
        Node(id="b", position=Position(x=10, y=20), title="B", is_done=True),
    ]
    connections = [Connection(id="c", from_="a", to="nowhere")]

    service.update_map(created.id, nodes, connections)

    updated = service.get_map(created.id)
    assert updated.nodes == nodes
    assert updated.connections == connections
    assert updated.name == "Graph"
    stored = next(m for m in _maps_on_disk(paths) if m["id"] == created.id)
    assert stored["connections"] == [{"id": "c", "from": "a", "to": "nowhere"}]


def test_update_unknown_map_raises_and_changes_nothing(service: MapService, paths: AppPaths) -> None:
    before = paths.maps_file.read_text(encoding="utf-8")

    with pytest.raises(NotFoundError) as excinfo:
        service.update_map("missing", [], [])

    assert excinfo.value.message == "Map not found"
    assert [m.id for m in service.get_maps()] == ["1"]
    assert paths.maps_file.read_text(encoding="utf-8") == before


def test_delete_map_removes_it(service: MapService, paths: AppPaths) -> None:
    created = service.create_map("Temporary")

    service.delete_map(created.id)

    assert service.get_map(created.id) is None
    assert [m["id"] for m in _maps_on_disk(paths)] == ["1"]


def test_delete_unknown_map_is_noop(service: MapService) -> None:
    service.delete_map("missing")

    assert [m.id for m in service.get_maps()] == ["1"]


def test_rename_map_changes_only_name(service: MapService) -> None:
    before = service.get_map("1")

    renamed = service.rename_map("1", "Foo")

    after = service.get_map("1")
    assert renamed == after
    assert after.name == "Foo"
    assert after.nodes == before.nodes
    assert after.connections == before.connections
    assert before.name == "Getting Started"


def test_rename_unknown_map_raises(service: MapService) -> None:
    with pytest.raises(NotFoundError):
        service.rename_map("missing", "Foo")


def test_changes_survive_reload(service: MapService, paths: AppPaths) -> None:
    created = service.create_map("Persistent")
    service.rename_map(created.id, "Renamed")

    reloaded = MapService(AppState(DocumentStore(paths)))

    assert reloaded.get_map(created.id).name == "Renamed"
