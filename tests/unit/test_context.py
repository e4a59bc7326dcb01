from pathlib import Path

import pytest

from fetshub.core.context import UserDirectory
from fetshub.core.errors import CatalogValidationError, PermissionDeniedError
from fetshub.core.seed import seed_users
from fetshub.models.project import ProjectDraft
from fetshub.models.user import UserRole
from tests.support.fakes import make_context


def test_directory_starts_with_first_user() -> None:
    directory = UserDirectory(seed_users())
    assert directory.current.role is UserRole.ADMIN
    assert [user.id for user in directory.list()] == ["1", "2", "3"]
    with pytest.raises(ValueError):
        UserDirectory([])


def test_select_switches_acting_user() -> None:
    directory = UserDirectory(seed_users())
    assert directory.select("3").name == "Center Manager"
    assert directory.current.role is UserRole.EDITOR
    with pytest.raises(LookupError):
        directory.select("99")


def test_role_changes_require_manage_users() -> None:
    directory = UserDirectory(seed_users())
    admin = directory.current
    updated = directory.update_role(admin, "3", "Developer")
    assert updated.role is UserRole.DEVELOPER
    assert directory.update_role(admin, "3", "Wizard").role is UserRole.VIEWER

    developer = directory.get("2")
    assert developer is not None
    with pytest.raises(PermissionDeniedError):
        directory.update_role(developer, "3", "Admin")


def test_remove_user_rules() -> None:
    directory = UserDirectory(seed_users())
    admin = directory.current
    with pytest.raises(CatalogValidationError):
        directory.remove(admin, admin.id)
    directory.remove(admin, "2")
    assert directory.get("2") is None
    with pytest.raises(LookupError):
        directory.remove(admin, "2")


@pytest.mark.asyncio
async def test_context_wires_catalog_and_collections(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    await context.ensure_loaded()
    assert context.catalog.loaded
    assert context.rotator.featured is not None

    context.collections.toggle_my_list("fets-live")
    context.collections.toggle_like("fets-live")
    context.session.selected = context.catalog.get("fets-live")

    await context.catalog.delete("fets-live", context.current_user, confirmed=True)

    assert context.collections.my_list == []
    assert context.collections.liked == []
    assert context.session.selected is None


@pytest.mark.asyncio
async def test_session_view_tracks_edits(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    await context.ensure_loaded()
    context.session.selected = context.catalog.get("fets-team")
    project = context.catalog.require("fets-team")
    draft = ProjectDraft.from_project(project).model_copy(
        update={"description": "edited", "change_reason": "copy"}
    )
    await context.catalog.update("fets-team", draft, context.current_user)
    assert context.session.selected is not None
    assert context.session.selected.description == "edited"


@pytest.mark.asyncio
async def test_start_and_stop_run_rotation(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    await context.start()
    assert context.rotator.running
    await context.stop()
    assert not context.rotator.running
