"""Translation between flat backend records and catalog models."""

from __future__ import annotations

import logging
from typing import Any, TypeAlias

from pydantic import ValidationError

from fetshub.models.project import ChangeLogEntry, ItemType, Project, ProjectStatus
from fetshub.models.repo import RepoState
from fetshub.models.validation import parse_timestamp

logger = logging.getLogger(__name__)

Record: TypeAlias = dict[str, Any]


def record_to_project(record: Record | None) -> Project:
    """Build a Project from a stored record, filling gaps with defaults."""
    if not record:
        msg = "Received invalid project data"
        raise ValueError(msg)

    tech_stack = record.get("tech_stack")
    return Project(
        id=str(record["id"]),
        name=record.get("name") or "Untitled Project",
        description=record.get("description") or "",
        status=record.get("status") or ProjectStatus.IDEA,
        website_url=record.get("website_url"),
        repo_url=record.get("repo_url"),
        image_url=record.get("image_url"),
        tech_stack=[str(tag) for tag in tech_stack] if isinstance(tech_stack, list) else [],
        files=record.get("files") or "",
        item_type=_item_type(record.get("item_type")),
        created_at=parse_timestamp(record.get("created_at")),
        change_history=_change_history(record.get("change_history")),
        git_state=_git_state(record.get("git_state")),
    )


def _item_type(value: Any) -> ItemType:
    try:
        return ItemType(value)
    except ValueError:
        return ItemType.APP


def _change_history(value: Any) -> list[ChangeLogEntry]:
    """Valid entries only; malformed ones are dropped."""
    if not isinstance(value, list):
        return []
    entries: list[ChangeLogEntry] = []
    for item in value:
        try:
            entries.append(ChangeLogEntry.model_validate(item))
        except ValidationError:
            logger.warning("Dropping malformed change log entry: %r", item)
    return entries


def _git_state(value: Any) -> RepoState | None:
    if not value:
        return None
    try:
        return RepoState.model_validate(value)
    except ValidationError as exc:
        logger.warning("Ignoring malformed repository state: %s", exc)
        return None


def project_to_record(project: Project) -> Record:
    status = project.status
    return {
        "id": project.id,
        "name": project.name,
        "description": project.description,
        "status": status.value if isinstance(status, ProjectStatus) else str(status),
        "website_url": project.website_url or "",
        "repo_url": project.repo_url or "",
        "image_url": project.image_url or "",
        "tech_stack": list(project.tech_stack),
        "files": project.files,
        "item_type": project.item_type.value,
        "created_at": project.created_at,
        "change_history": [
            entry.model_dump(mode="json", by_alias=True) for entry in project.change_history
        ],
        "git_state": (
            project.git_state.model_dump(mode="json", by_alias=True, exclude_none=True)
            if project.git_state
            else None
        ),
    }
