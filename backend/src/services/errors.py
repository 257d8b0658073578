"""Errors surfaced by the service layer."""

from __future__ import annotations


class AndromedaError(Exception):
    """Base class for request-level failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NotFoundError(AndromedaError):
    """Raised when an id-keyed update targets a missing map or task."""


class StorageError(AndromedaError):
    """Raised when a directory or document cannot be created, read or written."""


class MalformedDocumentError(AndromedaError):
    """Raised when a JSON document cannot be parsed (strict mode only)."""


class DecodeError(AndromedaError):
    """Raised when an attached file's base64 payload is malformed."""


class InvalidFileNameError(AndromedaError):
    """Raised when a file name would be staged outside the staging directory."""


class OpenError(AndromedaError):
    """Raised when the host OS cannot open a staged file."""


__all__ = [
    "AndromedaError",
    "NotFoundError",
    "StorageError",
    "MalformedDocumentError",
    "DecodeError",
    "InvalidFileNameError",
    "OpenError",
]
