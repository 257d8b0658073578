"""HTTP API routes for attached files."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from ...models.map import FileData
from ...services.file_staging import FileStagingService
from ..dependencies import get_file_staging

router = APIRouter(prefix="/api/files")

StagingDep = Annotated[FileStagingService, Depends(get_file_staging)]


class CacheDirResponse(BaseModel):
    path: str


@router.post("/open", status_code=status.HTTP_204_NO_CONTENT)
def open_file(file: FileData, staging: StagingDep) -> Response:
    """Copy an attachment to the cache directory and open it with the OS."""
    staging.open_file(file)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/cache-dir", response_model=CacheDirResponse)
def get_cache_dir(staging: StagingDep) -> CacheDirResponse:
    """Return the application cache directory."""
    return CacheDirResponse(path=str(staging.get_cache_dir()))
