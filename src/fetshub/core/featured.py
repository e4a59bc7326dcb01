"""Periodic random choice of the featured app."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import random

from fetshub.core.catalog import CatalogChange, CatalogStore
from fetshub.core.repo_sync import Sleeper
from fetshub.models.project import Project

logger = logging.getLogger(__name__)

DEFAULT_ROTATION_SECONDS = 120.0


class FeaturedRotator:
    """Holds the featured app and re-rolls it on a fixed interval."""

    def __init__(
        self,
        catalog: CatalogStore,
        *,
        interval_seconds: float = DEFAULT_ROTATION_SECONDS,
        rng: random.Random | None = None,
        sleeper: Sleeper | None = None,
    ) -> None:
        self._catalog = catalog
        self._interval = interval_seconds
        self._rng = rng or random.Random()
        self._sleep = sleeper or asyncio.sleep
        self._featured: Project | None = None
        self._task: asyncio.Task[None] | None = None
        catalog.subscribe(self._on_catalog_change)

    @property
    def featured(self) -> Project | None:
        return self._featured

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def pick(self) -> Project | None:
        """Choose uniformly among current apps; keeps the old pick if there are none."""
        apps = self._apps()
        if apps:
            self._featured = self._rng.choice(apps)
            logger.debug("Featured project is now %s", self._featured.id)
        return self._featured

    def start(self) -> None:
        if self.running:
            return
        self.pick()
        self._task = asyncio.create_task(self._rotate())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _rotate(self) -> None:
        while True:
            await self._sleep(self._interval)
            self.pick()

    def _apps(self) -> list[Project]:
        return [project for project in self._catalog.list() if project.is_app]

    def _on_catalog_change(self, change: CatalogChange) -> None:
        featured = self._featured
        if change.kind == "loaded":
            self.pick()
        elif featured is None or change.project_id != featured.id:
            return
        elif change.kind == "deleted":
            apps = self._apps()
            self._featured = apps[0] if apps else None
        elif change.kind == "updated":
            self._featured = self._catalog.get(featured.id)
