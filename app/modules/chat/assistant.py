"""Free-form question answering against the generative model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.core.errors import ProviderError
from app.core.logging import get_logger
from app.modules.generation.client import GenerationClient

logger = get_logger(__name__)

NO_ANSWER = "No answer found"
DEGRADED_NOTE = "AI assistant is unavailable right now. Please try again later."


@dataclass
class AskResult:
    answer: str
    degraded: bool = False
    note: Optional[str] = None


async def ask(question: str, client: GenerationClient) -> AskResult:
    try:
        text = await client.generate(question)
    except ProviderError as e:
        logger.warning("Ask failed: %s", e.message)
        return AskResult(answer="", degraded=True, note=DEGRADED_NOTE)
    return AskResult(answer=text.strip() or NO_ANSWER)
