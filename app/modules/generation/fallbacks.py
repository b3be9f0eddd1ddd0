"""Static fallback content served when generation fails.

One table keyed by item kind, so quiz and flashcard fallbacks cannot drift
apart. The built-in entries can be replaced per kind with a JSON file
(``FALLBACK_CONTENT_FILE``); overrides go through the same item models as
generated content and are rejected at load time when invalid.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ValidationError

from app.core.errors import ConfigurationError
from app.core.logging import get_logger
from app.modules.generation.models import ItemKind
from app.modules.generation.validator import ITEM_MODELS

logger = get_logger(__name__)

MIN_FALLBACK_ITEMS = 2

DEFAULT_FALLBACKS: Mapping[ItemKind, tuple[dict[str, Any], ...]] = MappingProxyType(
    {
        ItemKind.QUIZ: (
            {
                "type": "mcq",
                "question": "Which study technique strengthens memory by retrieving information without looking at notes?",
                "options": [
                    "Active recall",
                    "Re-reading",
                    "Highlighting",
                    "Copying notes",
                ],
                "answer": "Active recall",
            },
            {
                "type": "mcq",
                "question": "What does spaced repetition involve?",
                "options": [
                    "Reviewing material at increasing intervals",
                    "Studying everything in one long session",
                    "Reading the material once very slowly",
                    "Only reviewing the night before an exam",
                ],
                "answer": "Reviewing material at increasing intervals",
            },
        ),
        ItemKind.FLASHCARDS: (
            {
                "front": "What is the main topic of this content?",
                "back": "This content covers educational material that can be studied through active recall and spaced repetition techniques.",
            },
            {
                "front": "Why are flashcards effective for learning?",
                "back": "Flashcards promote active recall, which strengthens memory pathways and improves long-term retention of information.",
            },
            {
                "front": "What is spaced repetition?",
                "back": "Spaced repetition is a learning technique where information is reviewed at increasing intervals, optimizing memory retention and reducing forgetting.",
            },
        ),
    }
)

DEGRADED_NOTES: Mapping[ItemKind, str] = MappingProxyType(
    {
        ItemKind.QUIZ: "AI generation failed, showing sample questions. Please try again with different content.",
        ItemKind.FLASHCARDS: "AI generation failed, showing sample flashcards. Please try again with different content.",
    }
)


class FallbackTable:
    """Read-only fallback entries; every lookup builds fresh item models."""

    def __init__(self, entries: Mapping[ItemKind, Any]) -> None:
        frozen: dict[ItemKind, tuple[dict[str, Any], ...]] = {}
        for kind in ItemKind:
            raw = entries.get(kind)
            if raw is None:
                raise ConfigurationError(f"No fallback content for '{kind.value}'")
            frozen[kind] = _check_entries(kind, raw)
        self._entries = MappingProxyType(frozen)

    def items(self, kind: ItemKind) -> list[BaseModel]:
        model = ITEM_MODELS[kind]
        return [model.model_validate(entry) for entry in self._entries[kind]]

    def note(self, kind: ItemKind) -> str:
        return DEGRADED_NOTES[kind]

    @classmethod
    def from_file(cls, path: str | Path) -> "FallbackTable":
        """Load overrides from JSON; kinds missing from the file keep defaults."""
        p = Path(path)
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read fallback file {p}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Fallback file {p} must contain a JSON object")

        entries: dict[ItemKind, Any] = dict(DEFAULT_FALLBACKS)
        for key, value in data.items():
            try:
                kind = ItemKind(key)
            except ValueError:
                raise ConfigurationError(
                    f"Unknown item kind '{key}' in fallback file {p}"
                ) from None
            entries[kind] = value
        logger.info("Loaded fallback overrides from %s", p)
        return cls(entries)


def _check_entries(kind: ItemKind, raw: Any) -> tuple[dict[str, Any], ...]:
    if not isinstance(raw, (list, tuple)) or len(raw) < MIN_FALLBACK_ITEMS:
        raise ConfigurationError(
            f"Fallback content for '{kind.value}' needs at least {MIN_FALLBACK_ITEMS} items"
        )
    model = ITEM_MODELS[kind]
    checked = []
    for idx, entry in enumerate(raw):
        try:
            checked.append(model.model_validate(entry).model_dump())
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid fallback {kind.value} item {idx}: {e.errors()[0]['msg']}"
            ) from e
    return tuple(checked)


def load_fallbacks(path: Optional[str] = None) -> FallbackTable:
    if path:
        return FallbackTable.from_file(path)
    return FallbackTable(DEFAULT_FALLBACKS)
