"""AI helper routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fetshub.api.deps import get_app_context
from fetshub.api.routes.common import http_error
from fetshub.api.schemas.assistant import (
    AnalyzeStackRequest,
    AnalyzeStackResponse,
    SuggestResponse,
)
from fetshub.api.schemas.reference import UpdatesPayload
from fetshub.core.assistant import suggest_for_draft
from fetshub.core.context import AppContext
from fetshub.core.errors import CatalogError
from fetshub.models.project import ProjectDraft

router = APIRouter(prefix="/api/v1/assistant", tags=["assistant"])


@router.post("/suggest")
async def suggest(
    draft: ProjectDraft,
    context: AppContext = Depends(get_app_context),
) -> SuggestResponse:
    try:
        suggested = await suggest_for_draft(context.assistant, draft, context.current_user)
    except CatalogError as exc:
        raise http_error(exc) from exc
    return SuggestResponse(draft=suggested)


@router.post("/analyze-stack")
async def analyze_stack(
    request: AnalyzeStackRequest,
    context: AppContext = Depends(get_app_context),
) -> AnalyzeStackResponse:
    result = await context.assistant.analyze_stack(request.tech_stack)
    return AnalyzeStackResponse(analysis=UpdatesPayload.from_result(result))
