"""Domain error conditions raised by catalog operations."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogValidationError(CatalogError, ValueError):
    """Input rejected before any mutation took place."""


class ProjectNotFoundError(CatalogError, LookupError):
    def __init__(self, project_id: str) -> None:
        super().__init__(f"Project not found: {project_id}")
        self.project_id = project_id


class PermissionDeniedError(CatalogError, PermissionError):
    """Acting role lacks the capability for the requested action."""


class RemoteDeleteError(CatalogError, RuntimeError):
    """Backend refused or failed a delete; the record was kept."""


class SeedError(CatalogError, RuntimeError):
    pass


class RepoSyncError(CatalogError, RuntimeError):
    """Base class for simulated repository action failures."""


class RepoNotInitializedError(RepoSyncError):
    pass


class RepoBusyError(RepoSyncError):
    """Another pull or push is still in flight for the project."""


class NothingToPushError(RepoSyncError):
    pass
