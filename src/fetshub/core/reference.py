"""Lookup of static reference pages by identifier."""

from __future__ import annotations

from fetshub.core.assistant import SearchResult, TextAssistant
from fetshub.core.reference_data import SOP_SECTIONS, VENDOR_RESOURCES
from fetshub.models.reference import SOPSection, VendorResource

DEFAULT_SOP_ID = "overview"


def list_sops() -> list[SOPSection]:
    return list(SOP_SECTIONS.values())


def get_sop(sop_id: str) -> SOPSection | None:
    """Section for the id, or None when unknown."""
    return SOP_SECTIONS.get(sop_id)


def list_resources() -> list[VendorResource]:
    return list(VENDOR_RESOURCES.values())


def get_resource(name: str) -> VendorResource | None:
    return VENDOR_RESOURCES.get(name)


async def resource_updates(
    resource: VendorResource, assistant: TextAssistant
) -> SearchResult | None:
    """Live news for an external vendor; internal pages have none."""
    if resource.is_internal:
        return None
    return await assistant.search_updates(resource.name)
