"""User directory and session routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fetshub.api.deps import get_app_context
from fetshub.api.routes.common import http_error
from fetshub.api.schemas.users import (
    RoleUpdateRequest,
    SelectUserRequest,
    SessionStateResponse,
    SessionUserResponse,
    UsersResponse,
)
from fetshub.core.context import AppContext
from fetshub.core.errors import CatalogError
from fetshub.core.permissions import allowed_actions
from fetshub.models.user import User

router = APIRouter(prefix="/api/v1", tags=["users"])


def _session(user: User) -> SessionUserResponse:
    capabilities = sorted(capability.value for capability in allowed_actions(user.role))
    return SessionUserResponse(user=user, capabilities=capabilities)


@router.get("/users", response_model=UsersResponse)
async def list_users(context: AppContext = Depends(get_app_context)) -> UsersResponse:
    return UsersResponse(items=context.users.list())


@router.put("/users/{user_id}/role")
async def update_role(
    user_id: str,
    request: RoleUpdateRequest,
    context: AppContext = Depends(get_app_context),
) -> dict[str, User]:
    try:
        user = context.users.update_role(context.current_user, user_id, request.role)
    except CatalogError as exc:
        raise http_error(exc) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {"user": user}


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user(user_id: str, context: AppContext = Depends(get_app_context)) -> None:
    try:
        context.users.remove(context.current_user, user_id)
    except CatalogError as exc:
        raise http_error(exc) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/session/user")
async def session_user(context: AppContext = Depends(get_app_context)) -> SessionUserResponse:
    return _session(context.current_user)


@router.put("/session/user")
async def select_user(
    request: SelectUserRequest,
    context: AppContext = Depends(get_app_context),
) -> SessionUserResponse:
    try:
        user = context.users.select(request.user_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _session(user)


@router.get("/session")
async def session_state(context: AppContext = Depends(get_app_context)) -> SessionStateResponse:
    session = context.session
    return SessionStateResponse(
        selected=session.selected,
        selected_resource=session.selected_resource,
        selected_sop=session.selected_sop,
    )
