import asyncio
import logging

import pytest

from fetshub.core.catalog import COVER_IMAGE_REASON, CatalogChange, CatalogStore
from fetshub.core.errors import (
    CatalogValidationError,
    PermissionDeniedError,
    ProjectNotFoundError,
    RemoteDeleteError,
    SeedError,
)
from fetshub.core.seed import initial_projects, seed_users
from fetshub.db.mapping import project_to_record
from fetshub.models.project import ItemType, Project, ProjectDraft, ProjectStatus
from fetshub.models.repo import RepoState, RepoStatus
from fetshub.models.user import User, UserRole
from tests.support.fakes import InMemoryRecordStore

ADMIN, DEVELOPER, EDITOR = seed_users()
VIEWER = User(id="4", name="Guest", email="guest@fets.dev", role=UserRole.VIEWER)


async def _loaded(backend: InMemoryRecordStore) -> CatalogStore:
    catalog = CatalogStore(backend)
    await catalog.load()
    return catalog


def _backend_with(*projects: Project, fail_on: set[str] | None = None) -> InMemoryRecordStore:
    return InMemoryRecordStore([project_to_record(p) for p in projects], fail_on=fail_on)


@pytest.mark.asyncio
async def test_load_uses_backend_records() -> None:
    catalog = await _loaded(_backend_with(Project(id="a", name="Alpha")))
    assert [project.id for project in catalog.list()] == ["a"]
    assert catalog.loaded
    assert not catalog.offline


@pytest.mark.asyncio
async def test_load_shows_demo_catalog_when_backend_is_empty() -> None:
    catalog = await _loaded(InMemoryRecordStore())
    assert len(catalog.list()) == len(initial_projects())
    assert not catalog.offline


@pytest.mark.asyncio
async def test_load_failure_switches_to_sticky_offline_mode(
    caplog: pytest.LogCaptureFixture,
) -> None:
    backend = InMemoryRecordStore(fail_on={"list_all"})
    catalog = CatalogStore(backend)
    with caplog.at_level(logging.WARNING, logger="fetshub.core.catalog"):
        projects = await catalog.load()

    assert catalog.offline
    assert [project.id for project in projects] == [p.id for p in initial_projects()]
    assert "offline" in caplog.text

    backend.fail_on.clear()
    await catalog.load()
    assert backend.calls == ["list_all"]
    assert catalog.offline


@pytest.mark.asyncio
async def test_load_timeout_counts_as_unreachable() -> None:
    class _SlowStore(InMemoryRecordStore):
        async def list_all(self) -> list[dict[str, object]]:
            await asyncio.sleep(1)
            return []

    catalog = CatalogStore(_SlowStore(), load_timeout_seconds=0.01)
    await catalog.load()
    assert catalog.offline


@pytest.mark.asyncio
async def test_create_inserts_at_front_and_persists() -> None:
    backend = _backend_with(Project(id="a", name="Alpha"))
    catalog = await _loaded(backend)

    created = await catalog.create(
        ProjectDraft(name="  New  ", tech_stack="React, ,Vite", repo_url="https://git/x.git"),
        DEVELOPER,
    )

    assert created.name == "New"
    assert created.tech_stack == ["React", "Vite"]
    assert created.change_history == []
    assert created.git_state is not None
    assert created.git_state.commits[0].author == DEVELOPER.name
    assert catalog.list()[0].id == created.id
    assert backend.records[-1]["id"] == created.id


@pytest.mark.asyncio
async def test_create_assigns_distinct_ids() -> None:
    catalog = await _loaded(InMemoryRecordStore())
    ids = {(await catalog.create(ProjectDraft(name=f"p{i}"), ADMIN)).id for i in range(25)}
    assert len(ids) == 25


@pytest.mark.asyncio
async def test_create_file_is_always_deployed_without_repo() -> None:
    catalog = await _loaded(InMemoryRecordStore())
    created = await catalog.create(
        ProjectDraft(
            name="Guide",
            item_type=ItemType.FILE,
            status=ProjectStatus.IDEA,
            repo_url="https://git/guide.git",
        ),
        ADMIN,
    )
    assert created.status is ProjectStatus.COMPLETED
    assert created.git_state is None


@pytest.mark.asyncio
async def test_create_validation_and_permissions() -> None:
    catalog = await _loaded(InMemoryRecordStore())
    with pytest.raises(CatalogValidationError, match="Name is required"):
        await catalog.create(ProjectDraft(name="   "), ADMIN)
    with pytest.raises(PermissionDeniedError):
        await catalog.create(ProjectDraft(name="x"), EDITOR)


@pytest.mark.asyncio
async def test_create_keeps_local_record_when_backend_insert_fails(
    caplog: pytest.LogCaptureFixture,
) -> None:
    backend = _backend_with(Project(id="a", name="Alpha"), fail_on={"insert"})
    catalog = await _loaded(backend)
    with caplog.at_level(logging.WARNING, logger="fetshub.core.catalog"):
        created = await catalog.create(ProjectDraft(name="Local"), ADMIN)
    assert catalog.get(created.id) is not None
    assert "keeping local change" in caplog.text


@pytest.mark.asyncio
async def test_update_requires_reason_and_appends_history() -> None:
    backend = _backend_with(Project(id="a", name="Alpha"))
    catalog = await _loaded(backend)
    draft = ProjectDraft.from_project(catalog.require("a"))

    with pytest.raises(CatalogValidationError, match="reason"):
        await catalog.update("a", draft.model_copy(update={"name": "Beta"}), ADMIN)

    updated = await catalog.update(
        "a", draft.model_copy(update={"name": "Beta", "change_reason": "rename"}), ADMIN
    )
    assert updated.name == "Beta"
    assert [entry.reason for entry in updated.change_history] == ["rename"]
    assert updated.change_history[0].author == ADMIN.name
    assert backend.records[0]["name"] == "Beta"


@pytest.mark.asyncio
async def test_update_cover_image_gets_automatic_reason() -> None:
    catalog = await _loaded(_backend_with(Project(id="a", name="Alpha")))
    draft = ProjectDraft.from_project(catalog.require("a"))
    updated = await catalog.update(
        "a", draft.model_copy(update={"image_url": "https://img/new.png"}), EDITOR
    )
    assert updated.image_url == "https://img/new.png"
    assert updated.change_history[-1].reason == COVER_IMAGE_REASON


@pytest.mark.asyncio
async def test_update_applies_only_permitted_field_groups() -> None:
    original = Project(id="a", name="Alpha", tech_stack=["Go"], item_type=ItemType.APP)
    catalog = await _loaded(_backend_with(original))
    draft = ProjectDraft.from_project(original).model_copy(
        update={
            "description": "new words",
            "tech_stack": "Rust",
            "item_type": ItemType.FILE,
            "change_reason": "edit",
        }
    )

    by_editor = await catalog.update("a", draft, EDITOR)
    assert by_editor.description == "new words"
    assert by_editor.tech_stack == ["Go"]
    assert by_editor.item_type is ItemType.APP

    by_developer = await catalog.update("a", draft, DEVELOPER)
    assert by_developer.tech_stack == ["Rust"]
    assert by_developer.item_type is ItemType.APP

    by_admin = await catalog.update("a", draft, ADMIN)
    assert by_admin.item_type is ItemType.FILE
    assert by_admin.status is ProjectStatus.COMPLETED
    assert len(by_admin.change_history) == 3

    with pytest.raises(PermissionDeniedError):
        await catalog.update("a", draft, VIEWER)


@pytest.mark.asyncio
async def test_update_links_repository_once() -> None:
    catalog = await _loaded(_backend_with(Project(id="a", name="Alpha")))
    draft = ProjectDraft.from_project(catalog.require("a")).model_copy(
        update={"repo_url": "https://git/a.git", "change_reason": "link repo"}
    )
    updated = await catalog.update("a", draft, DEVELOPER)
    assert updated.git_state is not None
    assert updated.git_state.remote_url == "https://git/a.git"
    assert updated.git_state.status is RepoStatus.CLEAN


@pytest.mark.asyncio
async def test_update_unknown_project() -> None:
    catalog = await _loaded(InMemoryRecordStore())
    with pytest.raises(ProjectNotFoundError):
        await catalog.update("missing", ProjectDraft(name="x", change_reason="r"), ADMIN)


@pytest.mark.asyncio
async def test_delete_requires_confirmation_and_capability() -> None:
    catalog = await _loaded(_backend_with(Project(id="a", name="Alpha")))
    with pytest.raises(CatalogValidationError):
        await catalog.delete("a", ADMIN, confirmed=False)
    with pytest.raises(PermissionDeniedError):
        await catalog.delete("a", EDITOR, confirmed=True)

    await catalog.delete("a", DEVELOPER, confirmed=True)
    assert catalog.get("a") is None


@pytest.mark.asyncio
async def test_delete_failure_keeps_project() -> None:
    backend = _backend_with(Project(id="a", name="Alpha"), fail_on={"delete"})
    catalog = await _loaded(backend)
    with pytest.raises(RemoteDeleteError, match="Failed to delete project from database."):
        await catalog.delete("a", ADMIN, confirmed=True)
    assert catalog.get("a") is not None


@pytest.mark.asyncio
async def test_offline_delete_is_local_only() -> None:
    backend = InMemoryRecordStore(fail_on={"list_all", "delete"})
    catalog = await _loaded(backend)
    await catalog.delete("fets-live", ADMIN, confirmed=True)
    assert catalog.get("fets-live") is None
    assert "delete" not in backend.calls


@pytest.mark.asyncio
async def test_quick_save_skips_audit_log() -> None:
    catalog = await _loaded(_backend_with(Project(id="a", name="Alpha")))
    project = catalog.require("a").model_copy(update={"files": "README.md"})
    saved = await catalog.quick_save(project)
    assert saved.files == "README.md"
    assert saved.change_history == []


@pytest.mark.asyncio
async def test_snapshots_do_not_leak_mutations() -> None:
    catalog = await _loaded(_backend_with(Project(id="a", name="Alpha", tech_stack=["Go"])))
    catalog.require("a").tech_stack.append("Rust")
    assert catalog.require("a").tech_stack == ["Go"]


@pytest.mark.asyncio
async def test_seed_backend() -> None:
    backend = InMemoryRecordStore()
    catalog = await _loaded(backend)
    assert await catalog.seed_backend() is True
    assert len(backend.records) == len(initial_projects())
    assert await catalog.seed_backend() is False


@pytest.mark.asyncio
async def test_seed_backend_refused_offline() -> None:
    catalog = await _loaded(InMemoryRecordStore(fail_on={"list_all"}))
    with pytest.raises(SeedError):
        await catalog.seed_backend()


@pytest.mark.asyncio
async def test_listeners_see_every_mutation() -> None:
    catalog = CatalogStore(InMemoryRecordStore())
    seen: list[CatalogChange] = []
    catalog.subscribe(seen.append)

    await catalog.load()
    created = await catalog.create(ProjectDraft(name="x"), ADMIN)
    await catalog.delete(created.id, ADMIN, confirmed=True)

    assert [change.kind for change in seen] == ["loaded", "created", "deleted"]
    assert seen[-1].project_id == created.id


@pytest.mark.asyncio
async def test_load_skips_unreadable_records_and_stays_online(
    caplog: pytest.LogCaptureFixture,
) -> None:
    good = project_to_record(Project(id="real-1", name="Good"))
    odd = project_to_record(Project(id="real-2", name="Odd")) | {
        "item_type": "folder",
        "git_state": {"remote_url": "https://git/odd.git", "commits": []},
    }
    broken = {"name": "no id"}
    backend = InMemoryRecordStore([good, odd, broken])
    catalog = CatalogStore(backend)

    with caplog.at_level(logging.WARNING):
        await catalog.load()

    assert not catalog.offline
    assert [project.id for project in catalog.list()] == ["real-1", "real-2"]
    repaired = catalog.require("real-2")
    assert repaired.item_type is ItemType.APP
    assert repaired.git_state is None
    assert "Skipping unreadable project record" in caplog.text

    await catalog.create(ProjectDraft(name="Persisted"), ADMIN)
    assert backend.records[-1]["name"] == "Persisted"


@pytest.mark.asyncio
async def test_clearing_repo_url_drops_git_state() -> None:
    linked = Project(
        id="a",
        name="Alpha",
        repo_url="https://x/a.git",
        git_state=RepoState.initialize("https://x/a.git", "Ana"),
    )
    catalog = await _loaded(_backend_with(linked))
    draft = ProjectDraft.from_project(linked).model_copy(
        update={"repo_url": "", "change_reason": "unlink"}
    )

    updated = await catalog.update("a", draft, DEVELOPER)

    assert updated.repo_url is None
    assert updated.git_state is None


@pytest.mark.asyncio
async def test_changing_repo_url_starts_fresh_git_state() -> None:
    linked = Project(
        id="a",
        name="Alpha",
        repo_url="https://x/a.git",
        git_state=RepoState.initialize("https://x/a.git", "Ana"),
    )
    catalog = await _loaded(_backend_with(linked))
    unchanged = await catalog.update(
        "a",
        ProjectDraft.from_project(linked).model_copy(update={"change_reason": "copy edit"}),
        DEVELOPER,
    )
    assert unchanged.git_state == linked.git_state

    moved = await catalog.update(
        "a",
        ProjectDraft.from_project(linked).model_copy(
            update={"repo_url": "https://x/b.git", "change_reason": "moved"}
        ),
        DEVELOPER,
    )
    assert moved.git_state is not None
    assert moved.git_state.remote_url == "https://x/b.git"
    assert moved.git_state.commits[0].author == DEVELOPER.name


@pytest.mark.asyncio
async def test_converting_app_to_file_drops_git_state() -> None:
    linked = Project(
        id="a",
        name="Alpha",
        repo_url="https://x/a.git",
        git_state=RepoState.initialize("https://x/a.git", "Ana"),
    )
    catalog = await _loaded(_backend_with(linked))
    draft = ProjectDraft.from_project(linked).model_copy(
        update={"item_type": ItemType.FILE, "change_reason": "now a document"}
    )

    updated = await catalog.update("a", draft, ADMIN)

    assert updated.item_type is ItemType.FILE
    assert updated.git_state is None


@pytest.mark.asyncio
async def test_cancelled_load_leaves_state_untouched() -> None:
    started = asyncio.Event()

    class _HangingStore(InMemoryRecordStore):
        async def list_all(self) -> list[dict[str, object]]:
            started.set()
            await asyncio.Event().wait()
            return []

    catalog = CatalogStore(_HangingStore(), load_timeout_seconds=10)
    seen: list[CatalogChange] = []
    catalog.subscribe(seen.append)

    task = asyncio.create_task(catalog.load())
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert not catalog.loaded
    assert not catalog.offline
    assert catalog.list() == []
    assert seen == []
