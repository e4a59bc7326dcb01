"""Project API schemas."""

from __future__ import annotations

from pydantic import BaseModel

from fetshub.models.project import Project


class StatusGroup(BaseModel):
    """One display row of projects sharing a status."""

    status: str
    items: list[Project]


class ProjectsResponse(BaseModel):
    """Collection response for projects."""

    items: list[Project]
    groups: list[StatusGroup] | None = None


class CatalogStatusResponse(BaseModel):
    loaded: bool
    offline: bool
    featured: Project | None = None


class CloneRequest(BaseModel):
    """Repository URL to prefill a new project from."""

    git_url: str


class ToggleResponse(BaseModel):
    project_id: str
    active: bool


class SeedResponse(BaseModel):
    seeded: bool
