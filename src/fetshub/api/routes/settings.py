"""UI settings routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from fetshub.api.deps import get_app_context
from fetshub.api.schemas.settings import SettingsUpdateRequest
from fetshub.core.context import AppContext
from fetshub.models.settings import AppSettings

router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


@router.get("")
async def get_settings(context: AppContext = Depends(get_app_context)) -> AppSettings:
    return context.settings.settings


@router.put("")
async def update_settings(
    request: SettingsUpdateRequest,
    context: AppContext = Depends(get_app_context),
) -> AppSettings:
    try:
        return context.settings.update(**request.model_dump(exclude_none=True))
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
