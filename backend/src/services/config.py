"""Application configuration helpers."""

from __future__ import annotations

from functools import lru_cache
import os
from pathlib import Path
from typing import Optional

from platformdirs import user_cache_dir, user_data_dir
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_APP_NAME = "andromeda"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:9002",
    "tauri://localhost",
)


class AppConfig(BaseModel):
    """Runtime configuration loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(default=DEFAULT_APP_NAME, min_length=1)
    data_dir: Path = Field(..., description="Directory holding maps.json and calendar.json")
    cache_dir: Path = Field(..., description="Directory used to stage opened files")
    host: str = Field(default="127.0.0.1", description="Interface the API binds to")
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: tuple[str, ...] = Field(default=DEFAULT_CORS_ORIGINS)
    strict_documents: bool = Field(
        default=False,
        description="Raise on unreadable JSON documents instead of starting empty",
    )

    @field_validator("data_dir", "cache_dir", mode="before")
    @classmethod
    def _normalize_dir(cls, value: str | Path | None) -> Path:
        if value is None or value == "":
            raise ValueError("Directory path is required")
        path = value if isinstance(value, Path) else Path(value)
        return path.expanduser().resolve()


def _read_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(key, default)


def _read_flag(key: str, default: str) -> bool:
    return (_read_env(key, default) or "").lower() not in {"0", "false", "no", ""}


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Load and cache application configuration."""
    app_name = _read_env("ANDROMEDA_APP_NAME", DEFAULT_APP_NAME) or DEFAULT_APP_NAME
    data_dir = _read_env("ANDROMEDA_DATA_DIR", user_data_dir(app_name))
    cache_dir = _read_env("ANDROMEDA_CACHE_DIR", user_cache_dir(app_name))
    origins = _read_env("ANDROMEDA_CORS_ORIGINS")
    cors_origins = (
        tuple(origin.strip() for origin in origins.split(",") if origin.strip())
        if origins
        else DEFAULT_CORS_ORIGINS
    )

    return AppConfig(
        app_name=app_name,
        data_dir=data_dir,
        cache_dir=cache_dir,
        host=_read_env("ANDROMEDA_HOST", "127.0.0.1"),
        port=_read_env("ANDROMEDA_PORT", "8000"),
        cors_origins=cors_origins,
        strict_documents=_read_flag("ANDROMEDA_STRICT_DOCUMENTS", "false"),
    )


def reload_config() -> AppConfig:
    """Clear cached config (useful for tests) and reload."""
    get_config.cache_clear()
    return get_config()


__all__ = ["AppConfig", "get_config", "reload_config", "DEFAULT_APP_NAME"]
