"""Simulated repository panel routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from fetshub.api.deps import get_loaded_context
from fetshub.api.routes.common import http_error
from fetshub.api.schemas.git import RepoActionResponse
from fetshub.api.schemas.projects import CloneRequest
from fetshub.core.context import AppContext
from fetshub.core.errors import CatalogError
from fetshub.core.repo_sync import status_label
from fetshub.models.project import Project, ProjectDraft

router = APIRouter(prefix="/api/v1/projects", tags=["git"])


def _result(project: Project) -> RepoActionResponse:
    label = status_label(project.git_state) if project.git_state else ""
    return RepoActionResponse(project=project, label=label)


@router.post("/clone", status_code=status.HTTP_201_CREATED)
async def clone_repository(
    request: CloneRequest,
    context: AppContext = Depends(get_loaded_context),
) -> dict[str, ProjectDraft]:
    try:
        draft = await context.repo_sync.clone_draft(request.git_url)
    except CatalogError as exc:
        raise http_error(exc) from exc
    return {"draft": draft}


@router.post("/{project_id}/git/work")
async def git_work(
    project_id: str, context: AppContext = Depends(get_loaded_context)
) -> RepoActionResponse:
    try:
        project = await context.repo_sync.record_work(project_id)
    except CatalogError as exc:
        raise http_error(exc) from exc
    return _result(project)


@router.post("/{project_id}/git/pull")
async def git_pull(
    project_id: str, context: AppContext = Depends(get_loaded_context)
) -> RepoActionResponse:
    try:
        project = await context.repo_sync.pull(project_id)
    except CatalogError as exc:
        raise http_error(exc) from exc
    return _result(project)


@router.post("/{project_id}/git/push")
async def git_push(
    project_id: str, context: AppContext = Depends(get_loaded_context)
) -> RepoActionResponse:
    try:
        project = await context.repo_sync.push(project_id)
    except CatalogError as exc:
        raise http_error(exc) from exc
    return _result(project)
