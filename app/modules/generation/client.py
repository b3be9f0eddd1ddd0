"""Generative-model client built on pydantic-ai and the Gemini provider.

The client is constructed explicitly (see ``app.apis.deps``) and handed to the
pipeline; nothing here talks to the provider at import time. Provider imports
are kept lazy so a missing credential surfaces as ``ConfigurationError``
instead of an import failure.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

from pydantic_ai import Agent

from app.core.config import GeminiSettings
from app.core.errors import ConfigurationError, ProviderError
from app.core.logging import get_logger

if TYPE_CHECKING:
    from pydantic_ai.models import Model

logger = get_logger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.0-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0


def _build_google_model(model_name: str, api_key: str):
    """Build the Google Gemini model provider (lazy import)."""
    from pydantic_ai.models.google import GoogleModel
    from pydantic_ai.providers.google import GoogleProvider

    provider = GoogleProvider(api_key=api_key)
    return GoogleModel(model_name, provider=provider)


class GenerationClient:
    """Single text completion per call; no retry, bounded by ``timeout``."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model_name: str = DEFAULT_MODEL_NAME,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        model: Optional["Model"] = None,
    ) -> None:
        if model is None:
            if not api_key:
                raise ConfigurationError(
                    "Gemini API key not configured. Set GEMINI_API_KEY in your environment."
                )
            model = _build_google_model(model_name, api_key)
        if timeout <= 0:
            raise ConfigurationError("Generation timeout must be positive")
        self.model_name = model_name
        self.timeout = float(timeout)
        self._agent: Agent[None, str] = Agent[None, str](model, output_type=str)

    @classmethod
    def from_settings(cls, cfg: GeminiSettings) -> "GenerationClient":
        return cls(
            api_key=cfg.api_key,
            model_name=cfg.model_name,
            timeout=cfg.timeout_seconds,
        )

    async def generate(self, prompt: str) -> str:
        """Return the raw completion text for ``prompt``.

        Any provider failure (network, quota, auth, timeout) is raised as
        ``ProviderError``.
        """
        logger.info("Calling %s (prompt: %d chars)", self.model_name, len(prompt))
        try:
            res = await asyncio.wait_for(self._agent.run(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise ProviderError(
                f"Generation timed out after {self.timeout:g}s"
            ) from e
        except Exception as e:  # noqa: BLE001
            raise ProviderError(f"Generation failed: {e}") from e
        text = res.output or ""
        logger.info("Received completion (%d chars)", len(text))
        return text
