from __future__ import annotations

from fastapi import APIRouter

from app.apis.deps import ClientProvider, Fallbacks
from app.apis.quiz.schemas import PingResponse, QuizRequest, QuizResponse
from app.core.config import settings
from app.core.errors import InputValidationError
from app.core.logging import get_logger
from app.modules.quiz.generator import generate_quiz


logger = get_logger(__name__)

router = APIRouter()


@router.get(
    f"/{settings.app.api_prefix}/quiz/ping",
    response_model=PingResponse,
    tags=["quiz"],
)
async def ping() -> PingResponse:
    return PingResponse(status="quiz route is alive")


@router.post(
    f"/{settings.app.api_prefix}/quiz/generate",
    response_model=QuizResponse,
    response_model_exclude_none=True,
    tags=["quiz"],
)
async def create_quiz(
    req: QuizRequest, get_client: ClientProvider, fallbacks: Fallbacks
) -> QuizResponse:
    content = req.content
    min_chars = settings.generation.quiz_min_content_chars
    if not content or len(content.strip()) < min_chars:
        raise InputValidationError(
            f"Document content is too short or missing. Need at least {min_chars} characters."
        )

    logger.info("Generating quiz for content of length: %d", len(content))
    result = await generate_quiz(
        content,
        get_client(),
        fallbacks,
        max_chars=settings.generation.max_content_chars,
    )
    return QuizResponse(quiz=result.items, degraded=result.degraded, note=result.note)
