"""Flashcard generator.

Builds the instruction for either source content or a bare topic and runs it
through the shared generation pipeline. Content takes precedence when both are
given.
"""

from __future__ import annotations

from typing import Optional

from app.modules.generation.client import GenerationClient
from app.modules.generation.fallbacks import FallbackTable
from app.modules.generation.models import GenerationResult, ItemKind
from app.modules.generation.pipeline import run_generation

DEFAULT_MAX_CONTENT_CHARS = 8000

EXAMPLE_ITEM = (
    "{\n"
    '  "front": "Clear, concise question or concept",\n'
    '  "back": "Comprehensive explanation or answer"\n'
    "}"
)

_HEADER = (
    "IMPORTANT: Respond with ONLY a valid JSON array. "
    "No additional text, explanations, or formatting.\n\n"
    "Format for each flashcard:\n"
    f"{EXAMPLE_ITEM}\n\n"
)

_RULES = (
    "- Create 8-10 flashcards total\n"
    "- Mix of factual, conceptual, and application-based questions\n"
    "- Front should be concise (1-2 sentences max)\n"
    "- Back should be comprehensive but clear (2-4 sentences)\n"
    "- Ensure accuracy and educational value\n"
)


def build_flashcards_prompt(
    *,
    content: Optional[str] = None,
    topic: Optional[str] = None,
    max_chars: int = DEFAULT_MAX_CONTENT_CHARS,
) -> str:
    if content:
        return (
            "Create 8-10 educational flashcards based on the following content. "
            "Each flashcard should have a clear question/concept on the front and "
            "a comprehensive answer on the back.\n\n"
            f"{_HEADER}"
            "Requirements:\n"
            f"{_RULES}"
            "- Cover the most important concepts from the content\n\n"
            "CONTENT TO ANALYZE:\n"
            f'"""{content[:max_chars]}"""\n\n'
            "Respond with only the JSON array:"
        )
    if topic:
        return (
            f'Create 8-10 educational flashcards about the topic: "{topic[:max_chars]}"\n\n'
            f"{_HEADER}"
            "Requirements:\n"
            f"{_RULES}"
            "- Cover fundamental concepts, definitions, and applications\n"
            "- Cover different aspects of the topic\n\n"
            "Respond with only the JSON array:"
        )
    raise ValueError("content or topic is required")


async def generate_flashcards(
    client: GenerationClient,
    fallbacks: FallbackTable,
    *,
    content: Optional[str] = None,
    topic: Optional[str] = None,
    max_chars: int = DEFAULT_MAX_CONTENT_CHARS,
) -> GenerationResult:
    """Generate validated flashcards, or the fallback set when generation fails."""
    prompt = build_flashcards_prompt(content=content, topic=topic, max_chars=max_chars)
    return await run_generation(ItemKind.FLASHCARDS, prompt, client, fallbacks)
