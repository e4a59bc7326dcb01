"""Local key-value persistence for UI settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fetshub.models.settings import AppSettings

logger = logging.getLogger(__name__)

SETTINGS_KEY = "fets_settings"


class LocalKeyValueStore:
    """JSON file holding a flat mapping of keys to values."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, key: str) -> Any | None:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable local store %s: %s", self._path, exc)
            return {}
        return data if isinstance(data, dict) else {}


class SettingsStore:
    """Loads AppSettings at start and writes them back on every change."""

    def __init__(self, storage: LocalKeyValueStore) -> None:
        self._storage = storage
        self._settings = self._load()

    @property
    def settings(self) -> AppSettings:
        return self._settings.model_copy()

    def update(self, **changes: Any) -> AppSettings:
        merged = self._settings.model_dump() | changes
        self._settings = AppSettings.model_validate(merged)
        self._storage.set(SETTINGS_KEY, self._settings.model_dump(mode="json", by_alias=True))
        return self.settings

    def _load(self) -> AppSettings:
        raw = self._storage.get(SETTINGS_KEY)
        if raw is None:
            return AppSettings()
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Failed to load settings, using defaults: %s", exc)
            return AppSettings()
