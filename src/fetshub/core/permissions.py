"""Role capability table and field-level edit gating."""

from __future__ import annotations

from enum import Enum

from fetshub.core.errors import PermissionDeniedError
from fetshub.models.user import UserRole


class Capability(str, Enum):
    CREATE_PROJECT = "create_project"
    EDIT_METADATA = "edit_metadata"
    EDIT_TECHNICAL = "edit_technical"
    MANAGE_USERS = "manage_users"
    MANAGE_ALL_PROJECTS = "manage_all_projects"
    DELETE_PROJECT = "delete_project"


ROLE_CAPABILITIES: dict[UserRole, frozenset[Capability]] = {
    UserRole.ADMIN: frozenset(Capability),
    UserRole.DEVELOPER: frozenset(
        {
            Capability.CREATE_PROJECT,
            Capability.EDIT_METADATA,
            Capability.EDIT_TECHNICAL,
            Capability.DELETE_PROJECT,
        }
    ),
    UserRole.EDITOR: frozenset({Capability.EDIT_METADATA}),
    UserRole.VIEWER: frozenset(),
}

METADATA_FIELDS = frozenset(
    {"name", "description", "created_at", "status", "website_url", "image_url"}
)
TECHNICAL_FIELDS = frozenset({"tech_stack", "repo_url", "files"})


def allowed_actions(role: UserRole | str | None) -> frozenset[Capability]:
    return ROLE_CAPABILITIES.get(UserRole.parse(role), frozenset())


def can(role: UserRole | str | None, capability: Capability) -> bool:
    """Whether the role holds the capability; never raises."""
    return capability in allowed_actions(role)


def can_edit_field(role: UserRole | str | None, field: str) -> bool:
    """Field-level gate used by the edit form."""
    if field in METADATA_FIELDS:
        return can(role, Capability.EDIT_METADATA)
    if field in TECHNICAL_FIELDS:
        return can(role, Capability.EDIT_TECHNICAL)
    if field == "item_type":
        return can(role, Capability.MANAGE_ALL_PROJECTS)
    return False


def require(role: UserRole | str | None, capability: Capability) -> None:
    if not can(role, capability):
        msg = f"Role {UserRole.parse(role).value} may not {capability.value.replace('_', ' ')}"
        raise PermissionDeniedError(msg)
