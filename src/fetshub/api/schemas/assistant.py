"""AI helper API schemas."""

from __future__ import annotations

from pydantic import BaseModel

from fetshub.api.schemas.reference import UpdatesPayload
from fetshub.models.project import ProjectDraft


class SuggestResponse(BaseModel):
    """Draft with the suggestion applied, or null when none is available."""

    draft: ProjectDraft | None = None


class AnalyzeStackRequest(BaseModel):
    tech_stack: str


class AnalyzeStackResponse(BaseModel):
    analysis: UpdatesPayload | None = None
