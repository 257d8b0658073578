"""Application data and cache directory resolution."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from .config import AppConfig, get_config
from .errors import StorageError

logger = logging.getLogger(__name__)

MAPS_FILENAME = "maps.json"
CALENDAR_FILENAME = "calendar.json"
STAGING_DIRNAME = "andromeda_temp_files"


@dataclass(frozen=True)
class AppPaths:
    """Resolved on-disk locations used by the backend."""

    data_dir: Path
    cache_dir: Path

    @property
    def maps_file(self) -> Path:
        return self.data_dir / MAPS_FILENAME

    @property
    def calendar_file(self) -> Path:
        return self.data_dir / CALENDAR_FILENAME

    @property
    def staging_dir(self) -> Path:
        return self.cache_dir / STAGING_DIRNAME


def _ensure_dir(path: Path, label: str) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"Failed to create {label} directory {path}: {exc}") from exc
    return path


def resolve_paths(config: AppConfig | None = None) -> AppPaths:
    """
    Return the data and cache directories, creating them if absent.

    Raises StorageError if either directory cannot be created.
    """
    config = config or get_config()
    paths = AppPaths(
        data_dir=_ensure_dir(config.data_dir, "data"),
        cache_dir=_ensure_dir(config.cache_dir, "cache"),
    )
    logger.info(f"Using data dir {paths.data_dir} and cache dir {paths.cache_dir}")
    return paths


__all__ = [
    "AppPaths",
    "resolve_paths",
    "MAPS_FILENAME",
    "CALENDAR_FILENAME",
    "STAGING_DIRNAME",
]
