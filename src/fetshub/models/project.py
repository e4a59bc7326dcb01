"""Catalog domain models."""

from __future__ import annotations

from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import ConfigDict, Field, field_validator

from fetshub.models.base import CamelModel, now_millis
from fetshub.models.repo import RepoState


class ProjectStatus(str, Enum):
    """Lifecycle status for a catalog entry."""

    IDEA = "Concept Phase"
    IN_PROGRESS = "In Development"
    COMPLETED = "Deployed"
    ARCHIVED = "Deprecated"


class ItemType(str, Enum):
    """Distinguishes applications from reference documents."""

    APP = "app"
    FILE = "file"


def coerce_status(value: Any) -> Any:
    """Map known status strings onto the enum, leaving unknown values as-is."""
    if isinstance(value, str) and not isinstance(value, ProjectStatus):
        try:
            return ProjectStatus(value)
        except ValueError:
            return value
    return value


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ChangeLogEntry(CamelModel):
    """Audit record appended on every edit after creation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    date: int = Field(default_factory=now_millis)
    author: str
    reason: str = Field(min_length=1)


class Project(CamelModel):
    """Catalog entry: an app or a reference file."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    description: str = ""
    status: ProjectStatus | str = ProjectStatus.IDEA
    website_url: str | None = None
    repo_url: str | None = None
    image_url: str | None = None
    tech_stack: list[str] = Field(default_factory=list)
    files: str = ""
    item_type: ItemType = ItemType.APP
    created_at: int = Field(default_factory=now_millis)
    change_history: list[ChangeLogEntry] = Field(default_factory=list)
    git_state: RepoState | None = None

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, value: Any) -> Any:
        return coerce_status(value)

    @field_validator("website_url", "repo_url", "image_url", mode="before")
    @classmethod
    def blank_urls(cls, value: Any) -> Any:
        return blank_to_none(value)

    @field_validator("tech_stack")
    @classmethod
    def trim_tags(cls, value: list[str]) -> list[str]:
        return [tag.strip() for tag in value if tag.strip()]

    @property
    def is_app(self) -> bool:
        return self.item_type is ItemType.APP

    def snapshot(self) -> Project:
        """Detached deep copy for display-only holders."""
        return self.model_copy(deep=True)


class ProjectDraft(CamelModel):
    """Form payload for creating or editing a project."""

    name: str = ""
    description: str = ""
    status: ProjectStatus = ProjectStatus.IDEA
    website_url: str = ""
    repo_url: str = ""
    image_url: str = ""
    tech_stack: str = ""
    files: str = ""
    item_type: ItemType = ItemType.APP
    created_at: int | str | None = None
    change_reason: str | None = None

    @classmethod
    def from_project(cls, project: Project) -> ProjectDraft:
        """Prefill a draft with a project's current values."""
        return cls(
            name=project.name,
            description=project.description,
            status=(
                project.status
                if isinstance(project.status, ProjectStatus)
                else ProjectStatus.IDEA
            ),
            website_url=project.website_url or "",
            repo_url=project.repo_url or "",
            image_url=project.image_url or "",
            tech_stack=", ".join(project.tech_stack),
            files=project.files,
            item_type=project.item_type,
            created_at=project.created_at,
        )
