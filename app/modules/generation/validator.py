"""Parse an extracted JSON array and keep only well-formed items.

Validation filters rather than rejects: malformed entries are dropped and the
batch only fails when nothing usable is left. Survivors keep their original
relative order.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ValidationError

from app.core.errors import ParseError, SchemaError
from app.core.logging import get_logger
from app.modules.flashcards.models.flashcards import Flashcard
from app.modules.generation.models import ItemKind
from app.modules.quiz.models import QuizItem

logger = get_logger(__name__)

ITEM_MODELS: dict[ItemKind, type[BaseModel]] = {
    ItemKind.QUIZ: QuizItem,
    ItemKind.FLASHCARDS: Flashcard,
}

# Raw array length required before per-item filtering
MIN_RAW_ITEMS: dict[ItemKind, int] = {
    ItemKind.QUIZ: 1,
    ItemKind.FLASHCARDS: 3,
}

_TOO_FEW_MESSAGES = {
    ItemKind.QUIZ: "No valid questions found",
    ItemKind.FLASHCARDS: "Not enough valid flashcards returned",
}

_NONE_VALID_MESSAGES = {
    ItemKind.QUIZ: "No valid questions found",
    ItemKind.FLASHCARDS: "No valid flashcards found in generated content",
}


def parse_json_array(candidate: str) -> list[Any]:
    try:
        value = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ParseError(f"Failed to parse AI response as JSON: {e.msg}") from e
    if not isinstance(value, list):
        raise SchemaError("Response is not an array")
    return value


def filter_items(kind: ItemKind, raw_items: list[Any]) -> list[BaseModel]:
    """Validate each entry against the kind's model, dropping the bad ones."""
    model = ITEM_MODELS[kind]
    kept: list[BaseModel] = []
    for idx, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            logger.debug("Dropping %s item %d: not an object", kind.value, idx)
            continue
        try:
            kept.append(model.model_validate(raw))
        except ValidationError as e:
            logger.debug(
                "Dropping %s item %d: %s", kind.value, idx, e.errors()[0]["msg"]
            )
    return kept


def validate_items(kind: ItemKind, candidate: str) -> list[BaseModel]:
    """Parse ``candidate`` and return the well-formed items for ``kind``."""
    raw_items = parse_json_array(candidate)
    if len(raw_items) < MIN_RAW_ITEMS[kind]:
        raise SchemaError(_TOO_FEW_MESSAGES[kind])

    items = filter_items(kind, raw_items)
    if not items:
        raise SchemaError(_NONE_VALID_MESSAGES[kind])

    dropped = len(raw_items) - len(items)
    if dropped:
        logger.info(
            "Kept %d of %d %s items", len(items), len(raw_items), kind.value
        )
    return items
