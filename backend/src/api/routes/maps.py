"""HTTP API routes for mind maps."""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Response, status

from ...models.map import MapCreate, MapData, MapRename, MapUpdate
from ...services.map_service import MapService
from ..dependencies import get_map_service

router = APIRouter(prefix="/api/maps")

MapServiceDep = Annotated[MapService, Depends(get_map_service)]


@router.get("", response_model=list[MapData], response_model_exclude_none=True)
def get_maps(service: MapServiceDep):
    """List all maps."""
    return service.get_maps()


@router.post(
    "",
    response_model=MapData,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_map(create: MapCreate, service: MapServiceDep):
    """Create an empty map."""
    return service.create_map(create.name)


@router.get("/{map_id}", response_model=Optional[MapData], response_model_exclude_none=True)
def get_map(map_id: str, service: MapServiceDep):
    """Get a map by id; null when it does not exist."""
    return service.get_map(map_id)


@router.put("/{map_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_map(map_id: str, update: MapUpdate, service: MapServiceDep) -> Response:
    """Replace a map's nodes and connections."""
    service.update_map(map_id, update.nodes, update.connections)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{map_id}", response_model=MapData, response_model_exclude_none=True)
def rename_map(map_id: str, rename: MapRename, service: MapServiceDep):
    """Rename a map."""
    return service.rename_map(map_id, rename.new_name)


@router.delete("/{map_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_map(map_id: str, service: MapServiceDep) -> Response:
    """Delete a map (no-op when it does not exist)."""
    service.delete_map(map_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
