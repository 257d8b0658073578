"""FastAPI application main entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from .middleware import register_error_handlers
from .routes import calendar, files, maps, system
from ..services.config import AppConfig, get_config
from ..services.document_store import DocumentStore
from ..services.file_staging import FileStagingService, Opener
from ..services.paths import resolve_paths
from ..services.state import AppState

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None, opener: Optional[Opener] = None) -> FastAPI:
    """Build the API application; state is loaded when the app starts."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan handler to resolve directories and load documents."""
        cfg = config or get_config()
        logger.info("Running startup: loading maps and calendar documents...")
        paths = resolve_paths(cfg)
        store = DocumentStore(paths, strict=cfg.strict_documents)
        app.state.data = AppState(store)
        app.state.file_staging = FileStagingService(paths, opener=opener)
        logger.info("Startup complete")
        yield
        logger.info("Shutting down")

    system.install_memory_handler()

    app = FastAPI(
        title="Andromeda API",
        description="Local data layer for Andromeda mind maps and calendar tasks",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list((config or get_config()).cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(maps.router, tags=["maps"])
    app.include_router(calendar.router, tags=["calendar"])
    app.include_router(files.router, tags=["files"])
    app.include_router(system.router, tags=["system"])
    return app


app = create_app()


__all__ = ["app", "create_app"]
