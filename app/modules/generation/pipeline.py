"""Run one generation request end to end.

generate → extract → validate; any ``GenerationError`` along the way turns
into a degraded result carrying the fallback items for the requested kind.
"""

from __future__ import annotations

from app.core.errors import GenerationError
from app.core.logging import get_logger
from app.modules.generation.client import GenerationClient
from app.modules.generation.extractor import extract_json_array
from app.modules.generation.fallbacks import FallbackTable
from app.modules.generation.models import GenerationResult, ItemKind
from app.modules.generation.validator import validate_items

logger = get_logger(__name__)


async def run_generation(
    kind: ItemKind,
    prompt: str,
    client: GenerationClient,
    fallbacks: FallbackTable,
) -> GenerationResult:
    ctx = {"kind": kind.value}
    try:
        raw = await client.generate(prompt)
        logger.debug("Raw AI response: %.200s", raw, extra=ctx)
        candidate = extract_json_array(raw)
        items = validate_items(kind, candidate)
    except GenerationError as e:
        logger.warning(
            "Generation failed while %s: %s; serving fallback",
            e.stage,
            e.message,
            extra={**ctx, "stage": e.stage},
        )
        return GenerationResult(
            items=fallbacks.items(kind),
            degraded=True,
            note=fallbacks.note(kind),
        )

    logger.info("Generated %d items", len(items), extra=ctx)
    return GenerationResult(items=items)
