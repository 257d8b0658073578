"""Map-related Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Position(CamelModel):
    """Canvas coordinates of a node."""

    x: float
    y: float


class FileData(CamelModel):
    """File blob attached to a node."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "file-1",
                "name": "notes",
                "originalName": "notes.txt",
                "size": 11,
                "fileType": "text/plain",
                "content": "aGVsbG8gd29ybGQ=",
            }
        }
    )

    id: str
    name: str
    original_name: str
    size: int = Field(..., ge=0, description="Size of the decoded file in bytes")
    file_type: str = Field(
        ...,
        validation_alias=AliasChoices("fileType", "type", "file_type"),
        serialization_alias="fileType",
        description="MIME type reported by the front-end",
    )
    content: str = Field(..., description="Base64 encoded file content")


class Node(CamelModel):
    """A titled card on the map canvas."""

    id: str
    position: Position
    title: str
    description: str = ""
    links: list[str] = Field(default_factory=list, description="Ids of related nodes")
    files: list[FileData] = Field(default_factory=list)
    is_done: Optional[bool] = None
    size: Optional[str] = Field(None, description="Relative display size, e.g. '150%'")
    color: Optional[str] = None


class Connection(CamelModel):
    """Directed edge between two nodes of the same map."""

    id: str
    from_: str = Field(..., alias="from", description="Source node id")
    to: str = Field(..., description="Target node id")


class MapData(CamelModel):
    """A complete mind map."""

    id: str
    name: str
    nodes: list[Node] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)


class MapCreate(CamelModel):
    """Request payload to create a map."""

    name: str


class MapUpdate(CamelModel):
    """Request payload replacing a map's graph."""

    nodes: list[Node]
    connections: list[Connection]


class MapRename(CamelModel):
    """Request payload to rename a map."""

    new_name: str


__all__ = [
    "CamelModel",
    "Position",
    "FileData",
    "Node",
    "Connection",
    "MapData",
    "MapCreate",
    "MapUpdate",
    "MapRename",
]
