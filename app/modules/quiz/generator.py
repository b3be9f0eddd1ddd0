"""Quiz question generator.

Provides:
- build_quiz_prompt(content) -> str
- async generate_quiz(content, client, fallbacks) -> GenerationResult[QuizItem]
"""

from __future__ import annotations

from app.modules.generation.client import GenerationClient
from app.modules.generation.fallbacks import FallbackTable
from app.modules.generation.models import GenerationResult, ItemKind
from app.modules.generation.pipeline import run_generation

DEFAULT_MAX_CONTENT_CHARS = 8000

EXAMPLE_ITEM = (
    '{"type":"mcq","question":"What is the powerhouse of the cell?",'
    '"options":["Nucleus","Mitochondria","Ribosome","Golgi apparatus"],'
    '"answer":"Mitochondria"}'
)


def build_quiz_prompt(content: str, *, max_chars: int = DEFAULT_MAX_CONTENT_CHARS) -> str:
    return (
        "Read the following text and create 8-12 multiple-choice quiz questions "
        "for student practice. Questions should cover all important topics.\n\n"
        "IMPORTANT: Respond with ONLY a single valid JSON array. "
        "No additional text, explanations, or formatting.\n\n"
        "Each item must look exactly like this example:\n"
        f"{EXAMPLE_ITEM}\n\n"
        "Requirements:\n"
        "- Create 8-12 questions total\n"
        '- "type" is always "mcq"\n'
        "- Exactly 4 distinct options per question\n"
        '- "answer" must be copied verbatim from "options"\n\n'
        "TEXT:\n"
        f'"""{content[:max_chars]}"""\n\n'
        "Respond with only the JSON array:"
    )


async def generate_quiz(
    content: str,
    client: GenerationClient,
    fallbacks: FallbackTable,
    *,
    max_chars: int = DEFAULT_MAX_CONTENT_CHARS,
) -> GenerationResult:
    prompt = build_quiz_prompt(content, max_chars=max_chars)
    return await run_generation(ItemKind.QUIZ, prompt, client, fallbacks)
