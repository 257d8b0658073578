"""System routes for logs and diagnostics."""

import logging
from collections import deque
from typing import List, Dict, Any
from datetime import datetime

from fastapi import APIRouter, Query
from pydantic import BaseModel

router = APIRouter()

# Global in-memory log buffer
LOG_BUFFER: deque = deque(maxlen=200)

STANDARD_RECORD_FIELDS = {
    'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
    'funcName', 'levelname', 'levelno', 'lineno', 'module',
    'msecs', 'message', 'msg', 'name', 'pathname', 'process',
    'processName', 'relativeCreated', 'stack_info', 'taskName', 'thread', 'threadName',
}


class LogEntry(BaseModel):
    timestamp: str
    level: str
    logger: str
    message: str
    extra: Dict[str, Any]


class MemoryLogHandler(logging.Handler):
    """Custom handler to capture logs into memory."""
    def emit(self, record):
        try:
            msg = self.format(record)
            extra = {k: repr(v) for k, v in record.__dict__.items()
                     if k not in STANDARD_RECORD_FIELDS}

            entry = {
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": msg,
                "extra": extra
            }
            LOG_BUFFER.append(entry)
        except Exception:
            self.handleError(record)


def install_memory_handler(level: int = logging.INFO) -> MemoryLogHandler:
    """Attach the buffer handler to the root logger once and return it."""
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, MemoryLogHandler):
            return handler
    memory_handler = MemoryLogHandler()
    memory_handler.setFormatter(logging.Formatter('%(message)s'))
    root.addHandler(memory_handler)
    # Ensure level allows INFO
    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)
    return memory_handler


@router.get("/api/system/logs", response_model=List[LogEntry])
def get_logs(level: str = Query("DEBUG", description="Minimum level to return")):
    """Retrieve recent system logs."""
    threshold = logging.getLevelName(level.upper())
    if not isinstance(threshold, int):
        threshold = logging.DEBUG
    return [
        entry for entry in list(LOG_BUFFER)
        if logging.getLevelName(entry["level"]) >= threshold
    ]


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
