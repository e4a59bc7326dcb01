"""Static reference content: operating procedures and vendor pages."""

from __future__ import annotations

from pydantic import Field

from fetshub.models.base import CamelModel


class SOPStep(CamelModel):
    heading: str
    content: list[str] = Field(default_factory=list)


class SOPSection(CamelModel):
    """One standard operating procedure chapter."""

    id: str
    title: str
    purpose: str
    scope: str
    responsibilities: list[str] = Field(default_factory=list)
    steps: list[SOPStep] = Field(default_factory=list)
    flow: list[str] = Field(default_factory=list)


class SupportContact(CamelModel):
    phone: str
    email: str
    url: str


class ExamWindow(CamelModel):
    name: str
    window: str
    guidelines: str


class VendorResource(CamelModel):
    """Testing-vendor information page."""

    id: str
    name: str
    description: str
    rules: list[str] = Field(default_factory=list)
    support: SupportContact
    exams: list[ExamWindow] = Field(default_factory=list)
    logo_url: str | None = None

    @property
    def is_internal(self) -> bool:
        return self.id == "fets"
