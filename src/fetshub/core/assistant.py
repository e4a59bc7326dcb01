"""Text-generation helper backed by the Gemini REST API.

Every call degrades to ``None`` when the service is unavailable: no API key,
a transport failure, an error status, or a response that cannot be decoded.
Callers treat ``None`` as "no suggestion available".
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, TypeAlias

import httpx

from fetshub.core.errors import CatalogValidationError
from fetshub.core.permissions import Capability, require
from fetshub.models.project import ProjectDraft
from fetshub.models.user import User

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_MODEL = "gemini-2.5-flash"

JSONObject: TypeAlias = dict[str, Any]


@dataclass(slots=True)
class GroundingSource:
    title: str
    url: str


@dataclass(slots=True)
class SearchResult:
    """Free text answer plus the web pages it was grounded on."""

    text: str
    sources: list[GroundingSource] = field(default_factory=list)


@dataclass(slots=True)
class ProjectSuggestion:
    description: str
    suggested_file_tree: str


class TextAssistant:
    """Client for suggestion, update-search, and stack-analysis prompts."""

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout_seconds
        self._transport = transport

    @property
    def available(self) -> bool:
        return bool(self._api_key)

    async def suggest_details(self, name: str, tech_stack_text: str) -> ProjectSuggestion | None:
        prompt = (
            f'I am building a software project named "{name}" using the following '
            f'technologies: "{tech_stack_text}".\n\n'
            "Please provide:\n"
            "1. A concise, professional project description (max 2 sentences).\n"
            "2. A recommended file folder structure for this type of project."
        )
        body = await self._generate(
            prompt,
            generation_config={
                "responseMimeType": "application/json",
                "responseSchema": {
                    "type": "OBJECT",
                    "properties": {
                        "description": {"type": "STRING"},
                        "suggestedFiles": {
                            "type": "STRING",
                            "description": "A simple text representation of a file tree structure",
                        },
                    },
                },
            },
        )
        text = _response_text(body) if body is not None else ""
        if not text:
            return None
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error("Error generating project details: %s", exc)
            return None
        if not isinstance(payload, dict):
            return None
        return ProjectSuggestion(
            description=str(payload.get("description", "")),
            suggested_file_tree=str(payload.get("suggestedFiles", "")),
        )

    async def search_updates(self, resource_name: str) -> SearchResult | None:
        prompt = (
            "Find the latest significant news, outages, regulatory changes, or exam updates "
            f'for "{resource_name}". Summarize the 3 most important recent updates in a '
            "bulleted list. If there is no major recent news, provide a general status summary."
        )
        return await self._grounded_search(prompt, fallback="No updates found.")

    async def analyze_stack(self, tech_stack_text: str) -> SearchResult | None:
        prompt = (
            f'Analyze this tech stack: "{tech_stack_text}". Using Google Search, identify the '
            "latest stable versions for these technologies and any major compatibility "
            "warnings or recent deprecations I should be aware of. Keep it brief "
            "(under 100 words)."
        )
        return await self._grounded_search(prompt, fallback="Analysis failed.")

    async def _grounded_search(self, prompt: str, *, fallback: str) -> SearchResult | None:
        body = await self._generate(prompt, tools=[{"google_search": {}}])
        if body is None:
            return None
        return SearchResult(text=_response_text(body) or fallback, sources=_sources(body))

    async def _generate(
        self,
        prompt: str,
        *,
        generation_config: JSONObject | None = None,
        tools: list[JSONObject] | None = None,
    ) -> JSONObject | None:
        if not self._api_key:
            logger.warning("Gemini API key is missing; AI features are disabled")
            return None

        request: JSONObject = {"contents": [{"parts": [{"text": prompt}]}]}
        if generation_config:
            request["generationConfig"] = generation_config
        if tools:
            request["tools"] = tools

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    GEMINI_URL.format(model=self._model),
                    params={"key": self._api_key},
                    json=request,
                )
                response.raise_for_status()
                body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Gemini request failed: %s", exc)
            return None
        return body if isinstance(body, dict) else None


def _first_candidate(body: JSONObject) -> JSONObject:
    candidates = body.get("candidates") or []
    return candidates[0] if candidates and isinstance(candidates[0], dict) else {}


def _response_text(body: JSONObject) -> str:
    parts = (_first_candidate(body).get("content") or {}).get("parts") or []
    return "".join(str(part.get("text", "")) for part in parts if isinstance(part, dict))


def _sources(body: JSONObject) -> list[GroundingSource]:
    metadata = _first_candidate(body).get("groundingMetadata") or {}
    sources: list[GroundingSource] = []
    for chunk in metadata.get("groundingChunks") or []:
        web = chunk.get("web") if isinstance(chunk, dict) else None
        if web:
            sources.append(
                GroundingSource(title=str(web.get("title", "")), url=str(web.get("uri", "")))
            )
    return sources


async def suggest_for_draft(
    assistant: TextAssistant, draft: ProjectDraft, actor: User
) -> ProjectDraft | None:
    """Fill a draft's description (and empty file tree) from a suggestion."""
    require(actor.role, Capability.EDIT_TECHNICAL)
    if not draft.name.strip() or not draft.tech_stack.strip():
        msg = "Please enter Name and Tech Stack first."
        raise CatalogValidationError(msg)
    suggestion = await assistant.suggest_details(draft.name, draft.tech_stack)
    if suggestion is None:
        return None
    return draft.model_copy(
        update={
            "description": suggestion.description,
            "files": draft.files or suggestion.suggested_file_tree,
        }
    )
