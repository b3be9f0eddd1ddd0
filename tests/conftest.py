"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import pytest
from fastapi.testclient import TestClient

from app.apis.deps import get_client_provider, get_fallbacks
from app.modules.generation.fallbacks import load_fallbacks
from tests.support import ScriptedModel


@pytest.fixture
def fallbacks():
    return load_fallbacks()


@pytest.fixture
def make_api():
    """Build a TestClient whose generation client is backed by ``model``."""
    from main import app

    def _make(
        model: Optional[ScriptedModel] = None,
        overrides: Optional[dict[Callable[..., Any], Callable[..., Any]]] = None,
    ) -> TestClient:
        if model is not None:
            client = model.client()
            app.dependency_overrides[get_client_provider] = lambda: lambda: client
        app.dependency_overrides[get_fallbacks] = lambda: load_fallbacks()
        app.dependency_overrides.update(overrides or {})
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def gemini_unconfigured(monkeypatch):
    """Run with GEMINI_API_KEY unset and no cached client."""
    from app.apis.deps import get_generation_client
    from app.core.config import settings

    monkeypatch.setattr(settings.gemini, "api_key", None)
    get_generation_client.cache_clear()
    yield
    get_generation_client.cache_clear()
