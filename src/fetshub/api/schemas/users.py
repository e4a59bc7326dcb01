"""User and session API schemas."""

from __future__ import annotations

from pydantic import BaseModel

from fetshub.models.project import Project
from fetshub.models.user import User


class UsersResponse(BaseModel):
    items: list[User]


class RoleUpdateRequest(BaseModel):
    role: str


class SelectUserRequest(BaseModel):
    user_id: str


class SessionUserResponse(BaseModel):
    """Acting user with the capabilities the gate grants it."""

    user: User
    capabilities: list[str]


class SessionStateResponse(BaseModel):
    """Current selections of the dashboard session."""

    selected: Project | None = None
    selected_resource: str | None = None
    selected_sop: str | None = None
