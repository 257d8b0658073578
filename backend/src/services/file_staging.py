"""Stage attached files in the cache directory and open them with the host OS."""

from __future__ import annotations

import base64
import binascii
import logging
import os
from pathlib import Path
import subprocess
import sys
from typing import Callable, Optional

from ..models.map import FileData
from .errors import DecodeError, InvalidFileNameError, OpenError, StorageError
from .paths import AppPaths

logger = logging.getLogger(__name__)

Opener = Callable[[Path], None]


def open_path(path: Path) -> None:
    """Open a file with the platform's default application."""
    try:
        if sys.platform.startswith("win"):
            os.startfile(str(path))  # type: ignore[attr-defined]
        elif sys.platform == "darwin":
            subprocess.Popen(["open", str(path)])
        elif os.environ.get("TERMUX_VERSION"):
            subprocess.Popen(["termux-open", str(path)])
        else:
            subprocess.Popen(["xdg-open", str(path)])
    except OSError as exc:
        raise OpenError(f"Failed to open file: {exc}") from exc


def decode_content(content: str) -> bytes:
    """Decode a base64 payload, rejecting non-alphabet characters."""
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Failed to decode base64 content: {exc}") from exc


def staged_path(staging_dir: Path, original_name: str) -> Path:
    """
    Resolve the staging location for a file name.

    Raises InvalidFileNameError if the name is empty or escapes the directory.
    """
    if not original_name or original_name in {".", ".."}:
        raise InvalidFileNameError("File name must not be empty")
    root = staging_dir.resolve()
    target = (root / original_name).resolve()
    if target.parent != root:
        raise InvalidFileNameError(f"File name escapes staging directory: {original_name}")
    return target


class FileStagingService:
    """Writes decoded attachments to the cache and hands them to the OS."""

    def __init__(self, paths: AppPaths, opener: Optional[Opener] = None) -> None:
        self.paths = paths
        self.opener = opener or open_path

    def get_cache_dir(self) -> Path:
        return self.paths.cache_dir

    def stage_file(self, file: FileData) -> Path:
        """Decode a file's content and write it into the staging directory."""
        data = decode_content(file.content)
        staging_dir = self.paths.staging_dir
        try:
            staging_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create temp directory: {exc}") from exc

        target = staged_path(staging_dir, file.original_name)
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Failed to write temp file: {exc}") from exc
        logger.info(f"Staged {file.original_name!r} ({len(data)} bytes) at {target}")
        return target

    def open_file(self, file: FileData) -> Path:
        """Stage a file and open it with the default application."""
        target = self.stage_file(file)
        self.opener(target)
        logger.info(f"Opened {target}")
        return target


__all__ = ["FileStagingService", "open_path", "decode_content", "staged_path", "Opener"]
