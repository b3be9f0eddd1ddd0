from __future__ import annotations

from fastapi import APIRouter

from app.apis.deps import ClientProvider, Fallbacks
from app.apis.flashcards.schemas import FlashcardsRequest, FlashcardsResponse
from app.apis.quiz.schemas import PingResponse
from app.core.config import settings
from app.core.errors import InputValidationError
from app.core.logging import get_logger
from app.modules.flashcards.generator import generate_flashcards


logger = get_logger(__name__)

router = APIRouter()


@router.get(
    f"/{settings.app.api_prefix}/flashcards/ping",
    response_model=PingResponse,
    tags=["flashcards"],
)
async def ping() -> PingResponse:
    return PingResponse(status="flashcards route is alive")


@router.post(
    f"/{settings.app.api_prefix}/flashcards/generate",
    response_model=FlashcardsResponse,
    response_model_exclude_none=True,
    tags=["flashcards"],
)
async def create_flashcards(
    req: FlashcardsRequest, get_client: ClientProvider, fallbacks: Fallbacks
) -> FlashcardsResponse:
    content = req.content
    topic = (req.topic or "").strip() or None
    min_chars = settings.generation.flashcards_min_content_chars

    if not content and not topic:
        raise InputValidationError(
            "Either content or topic is required for flashcard generation."
        )
    if content and len(content.strip()) < min_chars:
        if not topic:
            raise InputValidationError(
                f"Content is too short for flashcard generation. Need at least {min_chars} characters."
            )
        # Too little text to work from; fall back to the topic prompt
        content = None

    logger.info(
        "Generating flashcards from %s",
        f"content ({len(content)} chars)" if content else f"topic '{topic}'",
    )
    result = await generate_flashcards(
        get_client(),
        fallbacks,
        content=content,
        topic=topic,
        max_chars=settings.generation.max_content_chars,
    )
    return FlashcardsResponse(
        flashcards=result.items, degraded=result.degraded, note=result.note
    )
