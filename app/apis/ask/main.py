from __future__ import annotations

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from app.apis.deps import ClientProvider
from app.core.config import settings
from app.core.errors import InputValidationError
from app.core.logging import get_logger
from app.modules.chat.assistant import ask


logger = get_logger(__name__)

router = APIRouter()


class AskRequest(BaseModel):
    question: Optional[str] = None


class AskResponse(BaseModel):
    answer: str
    degraded: bool = False
    note: Optional[str] = None


@router.post(
    f"/{settings.app.api_prefix}/ask",
    response_model=AskResponse,
    response_model_exclude_none=True,
    tags=["chat"],
)
async def ask_question(req: AskRequest, get_client: ClientProvider) -> AskResponse:
    question = (req.question or "").strip()
    if not question:
        raise InputValidationError("No question provided")

    logger.info("Received question (%d chars)", len(question))
    result = await ask(question, get_client())
    return AskResponse(answer=result.answer, degraded=result.degraded, note=result.note)
