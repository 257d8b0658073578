"""Pydantic models for data validation and serialization."""

from .map import (
    Connection,
    FileData,
    MapCreate,
    MapData,
    MapRename,
    MapUpdate,
    Node,
    Position,
)
from .task import Task, TaskCreate

__all__ = [
    "Position",
    "FileData",
    "Node",
    "Connection",
    "MapData",
    "MapCreate",
    "MapUpdate",
    "MapRename",
    "Task",
    "TaskCreate",
]
