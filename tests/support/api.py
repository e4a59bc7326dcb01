"""TestClient wiring around an isolated application context."""

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from fetshub.api.app import create_app
from fetshub.api.deps import get_app_context
from fetshub.core.context import AppContext
from tests.support.fakes import InMemoryRecordStore, make_context


def client_for(
    tmp_path: Path, backend: InMemoryRecordStore | None = None
) -> tuple[TestClient, AppContext]:
    context = make_context(tmp_path, backend)
    app = create_app()
    app.dependency_overrides[get_app_context] = lambda: context
    return TestClient(app), context
