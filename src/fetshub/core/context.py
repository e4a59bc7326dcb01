"""Application context: session state injected into the API layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fetshub.config import HubSettings
from fetshub.core.assistant import TextAssistant
from fetshub.core.catalog import CatalogChange, CatalogStore
from fetshub.core.errors import CatalogValidationError
from fetshub.core.featured import FeaturedRotator
from fetshub.core.permissions import Capability, require
from fetshub.core.repo_sync import RepoSyncSimulator, Sleeper
from fetshub.core.seed import seed_users
from fetshub.core.settings_store import LocalKeyValueStore, SettingsStore
from fetshub.core.views import UserCollections
from fetshub.db.store import RecordStore, SQLiteRecordStore
from fetshub.models.project import Project
from fetshub.models.user import User, UserRole

logger = logging.getLogger(__name__)


class UserDirectory:
    """Known users and the currently selected one."""

    def __init__(self, users: list[User]) -> None:
        if not users:
            msg = "At least one user is required"
            raise ValueError(msg)
        self._users = [user.model_copy() for user in users]
        self._current_id = self._users[0].id

    @property
    def current(self) -> User:
        user = self.get(self._current_id)
        if user is None:
            msg = f"Unknown user: {self._current_id}"
            raise LookupError(msg)
        return user

    def list(self) -> list[User]:
        return [user.model_copy() for user in self._users]

    def get(self, user_id: str) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user.model_copy()
        return None

    def select(self, user_id: str) -> User:
        """Switch the acting user; roles are taken at face value."""
        if self.get(user_id) is None:
            msg = f"Unknown user: {user_id}"
            raise LookupError(msg)
        self._current_id = user_id
        return self.current

    def update_role(self, actor: User, user_id: str, role: UserRole | str) -> User:
        require(actor.role, Capability.MANAGE_USERS)
        index = self._require_index(user_id)
        updated = self._users[index].model_copy(update={"role": UserRole.parse(role)})
        self._users[index] = updated
        logger.info("%s changed role of %s to %s", actor.name, user_id, updated.role.value)
        return updated.model_copy()

    def remove(self, actor: User, user_id: str) -> None:
        require(actor.role, Capability.MANAGE_USERS)
        if user_id == self._current_id:
            msg = "The active user cannot be removed"
            raise CatalogValidationError(msg)
        del self._users[self._require_index(user_id)]
        logger.info("%s removed user %s", actor.name, user_id)

    def _require_index(self, user_id: str) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        msg = f"Unknown user: {user_id}"
        raise LookupError(msg)


@dataclass(slots=True)
class SessionView:
    """Display-only snapshots held by the presentation layer."""

    selected: Project | None = None
    selected_resource: str | None = None
    selected_sop: str | None = None

    def refresh(self, catalog: CatalogStore, change: CatalogChange) -> None:
        held = self.selected
        if held is not None and (change.kind == "loaded" or change.project_id == held.id):
            self.selected = catalog.get(held.id)


@dataclass(slots=True)
class AppContext:
    """Everything one dashboard session needs, wired together."""

    catalog: CatalogStore
    repo_sync: RepoSyncSimulator
    rotator: FeaturedRotator
    settings: SettingsStore
    users: UserDirectory
    assistant: TextAssistant
    collections: UserCollections = field(default_factory=UserCollections)
    session: SessionView = field(default_factory=SessionView)

    def __post_init__(self) -> None:
        self.catalog.subscribe(self._on_catalog_change)

    @classmethod
    def build(
        cls,
        config: HubSettings,
        *,
        backend: RecordStore | None = None,
        sleeper: Sleeper | None = None,
    ) -> AppContext:
        if backend is None:
            config.db_path.parent.mkdir(parents=True, exist_ok=True)
            backend = SQLiteRecordStore(config.db_path)
        catalog = CatalogStore(backend, load_timeout_seconds=config.load_timeout_seconds)
        return cls(
            catalog=catalog,
            repo_sync=RepoSyncSimulator(
                catalog,
                latency_seconds=config.git_latency_seconds,
                clone_latency_seconds=config.clone_latency_seconds,
                sleeper=sleeper,
            ),
            rotator=FeaturedRotator(catalog, interval_seconds=config.rotation_interval_seconds),
            settings=SettingsStore(LocalKeyValueStore(config.settings_path)),
            users=UserDirectory(seed_users()),
            assistant=TextAssistant(config.gemini_api_key, model=config.gemini_model),
        )

    @property
    def current_user(self) -> User:
        return self.users.current

    async def ensure_loaded(self) -> None:
        if not self.catalog.loaded:
            await self.catalog.load()

    async def start(self) -> None:
        await self.ensure_loaded()
        self.rotator.start()

    async def stop(self) -> None:
        await self.rotator.stop()

    def _on_catalog_change(self, change: CatalogChange) -> None:
        if change.kind == "deleted" and change.project_id:
            self.collections.forget(change.project_id)
        self.session.refresh(self.catalog, change)
