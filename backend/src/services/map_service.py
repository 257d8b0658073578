"""Map CRUD operations."""

from __future__ import annotations

import logging
from typing import List, Optional
import uuid

from ..models.map import Connection, MapData, Node
from .errors import NotFoundError
from .state import AppState

logger = logging.getLogger(__name__)


def _index_of(maps: List[MapData], map_id: str) -> int:
    for index, item in enumerate(maps):
        if item.id == map_id:
            return index
    raise NotFoundError("Map not found")


class MapService:
    """Service for reading and mutating mind maps."""

    def __init__(self, state: AppState):
        self.state = state

    def get_maps(self) -> List[MapData]:
        return self.state.maps()

    def get_map(self, map_id: str) -> Optional[MapData]:
        """Return the map with the given id, or None."""
        return next((item for item in self.state.maps() if item.id == map_id), None)

    def create_map(self, name: str) -> MapData:
        """Create an empty map with a generated id."""
        new_map = MapData(id=str(uuid.uuid4()), name=name, nodes=[], connections=[])
        with self.state.edit_maps() as maps:
            maps.append(new_map)
        logger.info(f"Created map {new_map.id} ({name!r})")
        return new_map

    def update_map(self, map_id: str, nodes: List[Node], connections: List[Connection]) -> None:
        """
        Replace the nodes and connections of a map.

        Raises NotFoundError if no map has this id.
        """
        with self.state.edit_maps() as maps:
            index = _index_of(maps, map_id)
            maps[index] = maps[index].model_copy(
                update={"nodes": list(nodes), "connections": list(connections)}
            )
        logger.info(f"Updated map {map_id}: {len(nodes)} nodes, {len(connections)} connections")

    def delete_map(self, map_id: str) -> None:
        """Remove a map; unknown ids are ignored."""
        with self.state.edit_maps() as maps:
            maps[:] = [item for item in maps if item.id != map_id]
        logger.info(f"Deleted map {map_id}")

    def rename_map(self, map_id: str, new_name: str) -> MapData:
        """
        Rename a map and return it.

        Raises NotFoundError if no map has this id.
        """
        with self.state.edit_maps() as maps:
            index = _index_of(maps, map_id)
            renamed = maps[index].model_copy(update={"name": new_name})
            maps[index] = renamed
        logger.info(f"Renamed map {map_id} to {new_name!r}")
        return renamed


__all__ = ["MapService"]
