"""Simulated pull/push/commit panel for app projects."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import TypeAlias

from fetshub.core.catalog import CatalogStore
from fetshub.core.errors import (
    CatalogValidationError,
    NothingToPushError,
    RepoBusyError,
    RepoNotInitializedError,
)
from fetshub.models.base import now_millis
from fetshub.models.project import Project, ProjectDraft
from fetshub.models.repo import Commit, RepoState, RepoStatus

logger = logging.getLogger(__name__)

Sleeper: TypeAlias = Callable[[float], Awaitable[None]]

DEFAULT_LATENCY_SECONDS = 2.0
DEFAULT_CLONE_LATENCY_SECONDS = 1.5
MERGE_COMMIT_MESSAGE = "Merge branch 'feature/update' into main"
SYSTEM_AUTHOR = "System"
CLONED_TECH_STACK = "Auto-Detected: React, Node.js"
CLONED_FILE_TREE = "src/\n  components/\n    App.tsx\n  utils/\n    api.ts\nREADME.md"


class RepoSyncSimulator:
    """State machine over a project's ``git_state``.

    ``pull`` and ``push`` are single-flight per project; results are written
    back through ``CatalogStore.quick_save``.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        *,
        latency_seconds: float = DEFAULT_LATENCY_SECONDS,
        clone_latency_seconds: float = DEFAULT_CLONE_LATENCY_SECONDS,
        sleeper: Sleeper | None = None,
    ) -> None:
        self._catalog = catalog
        self._latency = latency_seconds
        self._clone_latency = clone_latency_seconds
        self._sleep = sleeper or asyncio.sleep
        self._busy: set[str] = set()

    def is_busy(self, project_id: str) -> bool:
        return project_id in self._busy

    async def record_work(self, project_id: str) -> Project:
        """Register one unit of local work; the repository becomes ahead."""
        project, state = self._require_repo(project_id)
        updated = state.model_copy(
            update={
                "status": RepoStatus.AHEAD,
                "pending_changes": (state.pending_changes or 0) + 1,
            }
        )
        logger.debug("Recorded local work on %s", project_id)
        return await self._save(project, updated)

    async def pull(self, project_id: str) -> Project:
        self._require_repo(project_id)
        with self._in_flight(project_id):
            await self._sleep(self._latency)
            project, state = self._require_repo(project_id)
            merge = Commit(message=MERGE_COMMIT_MESSAGE, author=SYSTEM_AUTHOR)
            updated = state.model_copy(
                update={
                    "commits": [merge, *state.commits],
                    "last_sync": now_millis(),
                    "status": RepoStatus.CLEAN,
                    "pending_changes": 0,
                }
            )
            logger.info("Pulled %s on %s", merge.hash, project_id)
            return await self._save(project, updated)

    async def push(self, project_id: str) -> Project:
        _, state = self._require_repo(project_id)
        if state.status is RepoStatus.CLEAN:
            msg = f"Nothing to push for {project_id}"
            raise NothingToPushError(msg)
        with self._in_flight(project_id):
            await self._sleep(self._latency)
            project, state = self._require_repo(project_id)
            updated = state.model_copy(
                update={
                    "last_sync": now_millis(),
                    "status": RepoStatus.CLEAN,
                    "pending_changes": 0,
                }
            )
            logger.info("Pushed %s", project_id)
            return await self._save(project, updated)

    async def clone_draft(self, git_url: str) -> ProjectDraft:
        """Prefill a new-project draft from a repository URL."""
        url = git_url.strip()
        if not url:
            msg = "A repository URL is required to clone"
            raise CatalogValidationError(msg)
        await self._sleep(self._clone_latency)
        return ProjectDraft(
            name=display_name_from_url(url),
            repo_url=url,
            tech_stack=CLONED_TECH_STACK,
            files=CLONED_FILE_TREE,
            description=f"Imported from git repository: {url}",
        )

    def _require_repo(self, project_id: str) -> tuple[Project, RepoState]:
        project = self._catalog.require(project_id)
        if project.git_state is None:
            msg = f"Project {project_id} has no linked repository"
            raise RepoNotInitializedError(msg)
        return project, project.git_state

    @contextmanager
    def _in_flight(self, project_id: str) -> Iterator[None]:
        if project_id in self._busy:
            msg = f"A git action is already running for {project_id}"
            raise RepoBusyError(msg)
        self._busy.add(project_id)
        try:
            yield
        finally:
            self._busy.discard(project_id)

    async def _save(self, project: Project, state: RepoState) -> Project:
        return await self._catalog.quick_save(project.model_copy(update={"git_state": state}))


def display_name_from_url(url: str) -> str:
    repo_name = url.rstrip("/").split("/")[-1].replace(".git", "") or "cloned-project"
    return repo_name[:1].upper() + repo_name[1:].replace("-", " ")


def status_label(state: RepoState) -> str:
    """Human-readable summary for all four sync states."""
    if state.status is RepoStatus.AHEAD:
        pending = state.pending_changes or 0
        return f"{pending} commit{'' if pending == 1 else 's'} ahead"
    if state.status is RepoStatus.BEHIND:
        return "Behind remote"
    if state.status is RepoStatus.DIVERGED:
        return "Diverged: resolve conflicts"
    return "Up to date"
