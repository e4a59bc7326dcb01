"""Shared API dependency providers."""

from __future__ import annotations

from fastapi import Depends

from fetshub.config import get_settings
from fetshub.core.context import AppContext

_CONTEXT: AppContext | None = None


def get_app_context() -> AppContext:
    global _CONTEXT
    if _CONTEXT is None:
        _CONTEXT = AppContext.build(get_settings())
    return _CONTEXT


async def get_loaded_context(context: AppContext = Depends(get_app_context)) -> AppContext:
    """Context whose catalog has completed its initial load."""
    await context.ensure_loaded()
    return context
