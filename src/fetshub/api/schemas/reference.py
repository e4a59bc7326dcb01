"""Reference content API schemas."""

from __future__ import annotations

from pydantic import BaseModel

from fetshub.core.assistant import SearchResult
from fetshub.models.reference import VendorResource


class SourceLink(BaseModel):
    title: str
    url: str


class UpdatesPayload(BaseModel):
    text: str
    sources: list[SourceLink]

    @classmethod
    def from_result(cls, result: SearchResult | None) -> UpdatesPayload | None:
        if result is None:
            return None
        return cls(
            text=result.text,
            sources=[SourceLink(title=source.title, url=source.url) for source in result.sources],
        )


class ResourcePageResponse(BaseModel):
    resource: VendorResource
    updates: UpdatesPayload | None = None
