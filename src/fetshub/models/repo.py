"""Simulated version-control state attached to app projects."""

from __future__ import annotations

import secrets
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import ConfigDict, Field, field_validator, model_validator

from fetshub.models.base import CamelModel, now_millis
from fetshub.models.validation import parse_timestamp

DEFAULT_BRANCH = "main"
INITIAL_COMMIT_MESSAGE = "Initial Commit"


def short_hash(length: int = 8) -> str:
    """Short opaque hex token standing in for a commit hash."""
    return secrets.token_hex(length)[:length]


class RepoStatus(str, Enum):
    """Sync status of a local working copy against its remote."""

    CLEAN = "clean"
    AHEAD = "ahead"
    BEHIND = "behind"
    DIVERGED = "diverged"


class Commit(CamelModel):
    """Immutable commit record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: f"cmt-{uuid4().hex[:12]}")
    hash: str = Field(default_factory=short_hash)
    message: str
    author: str
    date: int = Field(default_factory=now_millis)

    @field_validator("date", mode="before")
    @classmethod
    def epoch_millis(cls, value: Any) -> int:
        """Accept epoch millis or an ISO timestamp."""
        return parse_timestamp(value)


class RepoState(CamelModel):
    """Repository status panel for one project; commits are newest first."""

    remote_url: str
    branch: str = DEFAULT_BRANCH
    commits: list[Commit] = Field(min_length=1)
    last_sync: int = Field(default_factory=now_millis)
    status: RepoStatus = RepoStatus.CLEAN
    pending_changes: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def clean_has_no_pending(self) -> RepoState:
        if self.status is RepoStatus.CLEAN and self.pending_changes:
            msg = "a clean repository cannot carry pending changes"
            raise ValueError(msg)
        return self

    @classmethod
    def initialize(cls, remote_url: str, author: str | None) -> RepoState:
        """Fresh state for a newly linked repository."""
        return cls(
            remote_url=remote_url,
            branch=DEFAULT_BRANCH,
            commits=[
                Commit(
                    id="init",
                    hash=short_hash(6),
                    message=INITIAL_COMMIT_MESSAGE,
                    author=author or "User",
                )
            ],
            status=RepoStatus.CLEAN,
        )
