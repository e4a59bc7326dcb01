"""Runtime configuration loaded from FETSHUB_* environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HubSettings(BaseSettings):
    """Service settings."""

    model_config = SettingsConfigDict(env_prefix="FETSHUB_", extra="ignore", populate_by_name=True)

    db_path: Path = Path(".fetshub/fetshub.db")
    settings_path: Path = Path(".fetshub/local_store.json")
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FETSHUB_GEMINI_API_KEY", "API_KEY"),
    )
    gemini_model: str = "gemini-2.5-flash"
    load_timeout_seconds: float = 3.0
    git_latency_seconds: float = 2.0
    clone_latency_seconds: float = 1.5
    rotation_interval_seconds: float = 120.0
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


@lru_cache
def get_settings() -> HubSettings:
    return HubSettings()
