"""Service layer for persistence and business logic."""

from .calendar_service import CalendarService
from .config import AppConfig, get_config, reload_config
from .document_store import DocumentStore
from .errors import (
    AndromedaError,
    DecodeError,
    InvalidFileNameError,
    MalformedDocumentError,
    NotFoundError,
    OpenError,
    StorageError,
)
from .file_staging import FileStagingService, open_path
from .map_service import MapService
from .paths import AppPaths, resolve_paths
from .seed import build_seed_maps
from .state import AppState

__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "AppPaths",
    "resolve_paths",
    "DocumentStore",
    "build_seed_maps",
    "AppState",
    "MapService",
    "CalendarService",
    "FileStagingService",
    "open_path",
    "AndromedaError",
    "NotFoundError",
    "StorageError",
    "MalformedDocumentError",
    "DecodeError",
    "InvalidFileNameError",
    "OpenError",
]
