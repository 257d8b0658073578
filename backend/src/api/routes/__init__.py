"""HTTP API route handlers."""

from . import calendar, files, maps, system

__all__ = ["maps", "calendar", "files", "system"]
