"""Common route helpers."""

from __future__ import annotations

from fastapi import HTTPException, status

from fetshub.core.catalog import CatalogStore
from fetshub.core.errors import (
    CatalogError,
    CatalogValidationError,
    NothingToPushError,
    PermissionDeniedError,
    ProjectNotFoundError,
    RemoteDeleteError,
    RepoBusyError,
    RepoNotInitializedError,
    SeedError,
)
from fetshub.models.project import Project


def require_project(project_id: str, catalog: CatalogStore) -> Project:
    """Load project or return 404."""
    project = catalog.get(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


def http_error(exc: CatalogError) -> HTTPException:
    """Translate a domain failure into the matching HTTP status."""
    if isinstance(exc, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, ProjectNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, RepoBusyError | NothingToPushError | RepoNotInitializedError | SeedError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exc, RemoteDeleteError):
        code = status.HTTP_502_BAD_GATEWAY
    elif isinstance(exc, CatalogValidationError):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(exc))
