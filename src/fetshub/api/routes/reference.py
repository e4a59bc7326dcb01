"""SOP and vendor reference routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fetshub.api.deps import get_app_context
from fetshub.api.schemas.reference import ResourcePageResponse, UpdatesPayload
from fetshub.core import reference
from fetshub.core.context import AppContext
from fetshub.models.reference import SOPSection, VendorResource

router = APIRouter(prefix="/api/v1", tags=["reference"])


@router.get("/sop")
async def list_sops() -> dict[str, list[SOPSection]]:
    return {"items": reference.list_sops()}


@router.get("/sop/{sop_id}")
async def get_sop(
    sop_id: str, context: AppContext = Depends(get_app_context)
) -> dict[str, SOPSection]:
    section = reference.get_sop(sop_id)
    if section is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="SOP section not found")
    context.session.selected_sop = sop_id
    return {"section": section}


@router.get("/resources")
async def list_resources() -> dict[str, list[VendorResource]]:
    return {"items": reference.list_resources()}


@router.get("/resources/{name}")
async def get_resource(
    name: str,
    updates: bool = False,
    context: AppContext = Depends(get_app_context),
) -> ResourcePageResponse:
    """Vendor page; ``updates=true`` also asks the AI helper for recent news."""
    resource = reference.get_resource(name)
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    context.session.selected_resource = name
    result = await reference.resource_updates(resource, context.assistant) if updates else None
    return ResourcePageResponse(resource=resource, updates=UpdatesPayload.from_result(result))
