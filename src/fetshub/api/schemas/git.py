"""Repository panel API schemas."""

from __future__ import annotations

from pydantic import BaseModel

from fetshub.models.project import Project


class RepoActionResponse(BaseModel):
    """Project after a simulated git action, with its status summary."""

    project: Project
    label: str
