"""Authoritative in-memory catalog with best-effort remote persistence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Literal, TypeAlias
from uuid import uuid4

from fetshub.core.errors import (
    CatalogValidationError,
    ProjectNotFoundError,
    RemoteDeleteError,
    SeedError,
)
from fetshub.core.permissions import Capability, can, require
from fetshub.core.seed import initial_projects
from fetshub.db.mapping import Record, project_to_record, record_to_project
from fetshub.db.store import RecordStore
from fetshub.models.base import now_millis
from fetshub.models.project import ChangeLogEntry, ItemType, Project, ProjectDraft, ProjectStatus
from fetshub.models.repo import RepoState
from fetshub.models.user import User
from fetshub.models.validation import parse_tech_stack, parse_timestamp

logger = logging.getLogger(__name__)

DEFAULT_LOAD_TIMEOUT_SECONDS = 3.0
COVER_IMAGE_REASON = "Updated cover image"

ChangeKind: TypeAlias = Literal["loaded", "created", "updated", "deleted"]


@dataclass(slots=True, frozen=True)
class CatalogChange:
    """Notification emitted after every in-memory mutation."""

    kind: ChangeKind
    project_id: str | None = None


ChangeListener: TypeAlias = Callable[[CatalogChange], None]


class CatalogStore:
    """Single owner of the project list.

    Create and update apply locally first and never fail on backend errors;
    delete waits for the backend and surfaces its failure. Once the backend is
    found unreachable the store stays offline for the rest of the session.
    """

    def __init__(
        self,
        backend: RecordStore,
        *,
        load_timeout_seconds: float = DEFAULT_LOAD_TIMEOUT_SECONDS,
        seed: Callable[[], list[Project]] = initial_projects,
    ) -> None:
        self._backend = backend
        self._load_timeout = load_timeout_seconds
        self._seed = seed
        self._projects: list[Project] = []
        self._offline = False
        self._loaded = False
        self._listeners: list[ChangeListener] = []

    @property
    def offline(self) -> bool:
        return self._offline

    @property
    def loaded(self) -> bool:
        return self._loaded

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def list(self) -> list[Project]:
        return [project.snapshot() for project in self._projects]

    def get(self, project_id: str) -> Project | None:
        index = self._index_of(project_id)
        return None if index is None else self._projects[index].snapshot()

    def require(self, project_id: str) -> Project:
        project = self.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def load(self) -> list[Project]:
        """Fetch the catalog, falling back to the seed dataset when offline."""
        if self._offline:
            logger.debug("Offline mode is sticky; skipping record store")
            return self.list()
        try:
            records = await asyncio.wait_for(self._backend.list_all(), self._load_timeout)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Record store unavailable, switching to offline mode: %s", exc)
            self._offline = True
            projects = self._seed()
        else:
            projects = _readable_projects(records)
            if not projects:
                logger.info("Record store is empty; showing demo catalog")
                projects = self._seed()
        self._projects = projects
        self._loaded = True
        self._notify(CatalogChange("loaded"))
        return self.list()

    async def create(self, draft: ProjectDraft, actor: User) -> Project:
        require(actor.role, Capability.CREATE_PROJECT)
        name = draft.name.strip()
        if not name:
            msg = "Project/File Name is required."
            raise CatalogValidationError(msg)

        repo_url = draft.repo_url.strip()
        project = Project(
            id=self._new_id(),
            name=name,
            description=draft.description,
            status=_coerced_status(draft.item_type, draft.status),
            website_url=draft.website_url,
            repo_url=repo_url,
            image_url=draft.image_url,
            tech_stack=parse_tech_stack(draft.tech_stack),
            files=draft.files,
            item_type=draft.item_type,
            created_at=parse_timestamp(draft.created_at),
            change_history=[],
            git_state=(
                RepoState.initialize(repo_url, actor.name)
                if repo_url and draft.item_type is ItemType.APP
                else None
            ),
        )
        self._projects.insert(0, project)
        self._notify(CatalogChange("created", project.id))
        logger.info("Created %s %s (%s)", project.item_type.value, project.id, project.name)

        await self._sync_quietly(
            f"create {project.id}", lambda: self._backend.insert(project_to_record(project))
        )
        return project.snapshot()

    async def update(self, project_id: str, draft: ProjectDraft, actor: User) -> Project:
        """Apply an edit and append exactly one change log entry."""
        index = self._require_index(project_id)
        current = self._projects[index]
        edits_metadata = can(actor.role, Capability.EDIT_METADATA)
        edits_technical = can(actor.role, Capability.EDIT_TECHNICAL)
        if not (edits_metadata or edits_technical):
            require(actor.role, Capability.EDIT_METADATA)

        name = draft.name.strip() if edits_metadata else current.name
        if not name:
            msg = "Project/File Name is required."
            raise CatalogValidationError(msg)

        image_url = (draft.image_url or None) if edits_metadata else current.image_url
        reason = (draft.change_reason or "").strip()
        if not reason:
            if image_url == current.image_url:
                msg = "A reason for change is required"
                raise CatalogValidationError(msg)
            reason = COVER_IMAGE_REASON

        item_type = (
            draft.item_type
            if can(actor.role, Capability.MANAGE_ALL_PROJECTS)
            else current.item_type
        )
        changes: dict[str, object] = {"item_type": item_type, "image_url": image_url}
        if edits_metadata:
            changes.update(
                name=name,
                description=draft.description,
                status=_coerced_status(item_type, draft.status),
                website_url=draft.website_url or None,
                created_at=(
                    parse_timestamp(draft.created_at)
                    if draft.created_at is not None
                    else current.created_at
                ),
            )
        elif item_type is ItemType.FILE:
            changes["status"] = ProjectStatus.COMPLETED
        if edits_technical:
            changes.update(
                tech_stack=parse_tech_stack(draft.tech_stack),
                repo_url=draft.repo_url.strip() or None,
                files=draft.files,
            )

        repo_url = changes.get("repo_url", current.repo_url)
        git_state = current.git_state
        if not repo_url or item_type is ItemType.FILE:
            git_state = None
        elif git_state is None or repo_url != current.repo_url:
            git_state = RepoState.initialize(str(repo_url), actor.name)

        entry = ChangeLogEntry(author=actor.name or "Unknown", reason=reason)
        updated = current.model_copy(
            deep=True,
            update={
                **changes,
                "git_state": git_state,
                "change_history": [*current.change_history, entry],
            },
        )
        self._projects[index] = updated
        self._notify(CatalogChange("updated", project_id))
        logger.info("Updated %s by %s: %s", project_id, entry.author, reason)

        await self._sync_quietly(
            f"update {project_id}",
            lambda: self._backend.update(project_id, project_to_record(updated)),
        )
        return updated.snapshot()

    async def delete(self, project_id: str, actor: User, *, confirmed: bool) -> None:
        """Remove a project; a backend failure is reported and nothing is removed."""
        require(actor.role, Capability.DELETE_PROJECT)
        if not confirmed:
            msg = "Deletion must be confirmed"
            raise CatalogValidationError(msg)
        self._require_index(project_id)

        if not self._offline:
            try:
                await self._backend.delete(project_id)
            except Exception as exc:
                logger.error("Failed to delete %s from record store: %s", project_id, exc)
                msg = "Failed to delete project from database."
                raise RemoteDeleteError(msg) from exc

        index = self._index_of(project_id)
        if index is not None:
            del self._projects[index]
        self._notify(CatalogChange("deleted", project_id))
        logger.info("Deleted %s", project_id)

    async def quick_save(self, project: Project) -> Project:
        """Replace a record wholesale without an audit entry."""
        index = self._require_index(project.id)
        stored = project.snapshot()
        self._projects[index] = stored
        self._notify(CatalogChange("updated", project.id))

        await self._sync_quietly(
            f"save {project.id}",
            lambda: self._backend.update(project.id, project_to_record(stored)),
        )
        return stored.snapshot()

    async def seed_backend(self) -> bool:
        """Populate an empty backend with the demo catalog and reload from it."""
        if self._offline:
            msg = "Cannot seed database in offline mode."
            raise SeedError(msg)
        try:
            if await self._backend.count() != 0:
                return False
            for project in self._seed():
                await self._backend.insert(project_to_record(project))
            records = await self._backend.list_all()
        except Exception as exc:  # noqa: BLE001
            logger.error("Seeding failed: %s", exc)
            return False

        self._projects = _readable_projects(records)
        self._notify(CatalogChange("loaded"))
        logger.info("Seeded record store with %d projects", len(self._projects))
        return True

    async def _sync_quietly(self, action: str, call: Callable[[], Awaitable[None]]) -> None:
        if self._offline:
            return
        try:
            await call()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Remote %s failed; keeping local change: %s", action, exc)

    def _notify(self, change: CatalogChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    def _index_of(self, project_id: str) -> int | None:
        for index, project in enumerate(self._projects):
            if project.id == project_id:
                return index
        return None

    def _require_index(self, project_id: str) -> int:
        index = self._index_of(project_id)
        if index is None:
            raise ProjectNotFoundError(project_id)
        return index

    def _new_id(self) -> str:
        while True:
            candidate = f"{now_millis()}-{uuid4().hex[:8]}"
            if self._index_of(candidate) is None:
                return candidate


def _coerced_status(item_type: ItemType, status: ProjectStatus) -> ProjectStatus:
    """Reference files are always shown as deployed."""
    return ProjectStatus.COMPLETED if item_type is ItemType.FILE else status


def _readable_projects(records: list[Record]) -> list[Project]:
    """Map stored records, skipping any that cannot be read at all."""
    projects: list[Project] = []
    for record in records:
        try:
            projects.append(record_to_project(record))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping unreadable project record: %s", exc)
    return projects
