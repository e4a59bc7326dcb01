"""Project catalog routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from fetshub.api.deps import get_loaded_context
from fetshub.api.routes.common import http_error, require_project
from fetshub.api.schemas.projects import (
    ProjectsResponse,
    SeedResponse,
    StatusGroup,
    ToggleResponse,
)
from fetshub.core.context import AppContext
from fetshub.core.errors import CatalogError
from fetshub.core.views import Category, derive_view, group_by_status
from fetshub.models.project import Project, ProjectDraft

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.get("", response_model=ProjectsResponse)
async def list_projects(
    category: Category = Category.HOME,
    q: str = "",
    grouped: bool = False,
    context: AppContext = Depends(get_loaded_context),
) -> ProjectsResponse:
    items = derive_view(
        context.catalog.list(),
        category=category,
        query=q,
        my_list_ids=context.collections.my_list,
    )
    groups = None
    if grouped:
        groups = [
            StatusGroup(status=key, items=bucket)
            for key, bucket in group_by_status(items).items()
        ]
    return ProjectsResponse(items=items, groups=groups)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    draft: ProjectDraft,
    context: AppContext = Depends(get_loaded_context),
) -> dict[str, Project]:
    try:
        project = await context.catalog.create(draft, context.current_user)
    except CatalogError as exc:
        raise http_error(exc) from exc
    return {"project": project}


@router.post("/seed")
async def seed_projects(context: AppContext = Depends(get_loaded_context)) -> SeedResponse:
    try:
        seeded = await context.catalog.seed_backend()
    except CatalogError as exc:
        raise http_error(exc) from exc
    return SeedResponse(seeded=seeded)


@router.get("/{project_id}")
async def get_project(
    project_id: str, context: AppContext = Depends(get_loaded_context)
) -> dict[str, Project]:
    project = require_project(project_id, context.catalog)
    context.session.selected = project
    return {"project": project}


@router.put("/{project_id}")
async def update_project(
    project_id: str,
    draft: ProjectDraft,
    context: AppContext = Depends(get_loaded_context),
) -> dict[str, Project]:
    try:
        project = await context.catalog.update(project_id, draft, context.current_user)
    except CatalogError as exc:
        raise http_error(exc) from exc
    return {"project": project}


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str,
    confirm: bool = False,
    context: AppContext = Depends(get_loaded_context),
) -> None:
    try:
        await context.catalog.delete(project_id, context.current_user, confirmed=confirm)
    except CatalogError as exc:
        raise http_error(exc) from exc


@router.post("/{project_id}/my-list")
async def toggle_my_list(
    project_id: str, context: AppContext = Depends(get_loaded_context)
) -> ToggleResponse:
    require_project(project_id, context.catalog)
    active = context.collections.toggle_my_list(project_id)
    return ToggleResponse(project_id=project_id, active=active)


@router.post("/{project_id}/like")
async def toggle_like(
    project_id: str, context: AppContext = Depends(get_loaded_context)
) -> ToggleResponse:
    require_project(project_id, context.catalog)
    return ToggleResponse(project_id=project_id, active=context.collections.toggle_like(project_id))


