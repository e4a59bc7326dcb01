"""Users and roles."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from fetshub.models.base import CamelModel


class UserRole(str, Enum):
    """Named capability sets; see fetshub.core.permissions."""

    ADMIN = "Admin"
    DEVELOPER = "Developer"
    EDITOR = "Editor"
    VIEWER = "Viewer"

    @classmethod
    def parse(cls, value: UserRole | str | None) -> UserRole:
        """Resolve a role value, treating anything unrecognized as Viewer."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.VIEWER


class User(CamelModel):
    id: str
    name: str
    email: str
    role: UserRole = UserRole.VIEWER
    avatar_url: str | None = Field(default=None)
