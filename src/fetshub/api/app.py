"""FastAPI app entrypoint."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI

from fetshub.api.deps import get_app_context, get_loaded_context
from fetshub.api.routes.assistant import router as assistant_router
from fetshub.api.routes.git import router as git_router
from fetshub.api.routes.projects import router as projects_router
from fetshub.api.routes.reference import router as reference_router
from fetshub.api.routes.settings import router as settings_router
from fetshub.api.routes.users import router as users_router
from fetshub.api.schemas.projects import CatalogStatusResponse
from fetshub.config import get_settings
from fetshub.core.context import AppContext
from fetshub.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    context = app.dependency_overrides.get(get_app_context, get_app_context)()
    await context.start()
    try:
        yield
    finally:
        await context.stop()


def create_app() -> FastAPI:
    app = FastAPI(title="FETS Hub API", version="0.1.0", lifespan=lifespan)
    app.include_router(projects_router)
    app.include_router(git_router)
    app.include_router(reference_router)
    app.include_router(settings_router)
    app.include_router(users_router)
    app.include_router(assistant_router)

    @app.get("/api/v1/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/v1/status", tags=["system"])
    async def catalog_status(
        context: AppContext = Depends(get_loaded_context),
    ) -> CatalogStatusResponse:
        return CatalogStatusResponse(
            loaded=context.catalog.loaded,
            offline=context.catalog.offline,
            featured=context.rotator.featured,
        )

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run("fetshub.api.app:app", host=settings.host, port=settings.port, reload=False)
