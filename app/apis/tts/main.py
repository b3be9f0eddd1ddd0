from __future__ import annotations

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import Response
from pydantic import BaseModel

from app.apis.deps import Synthesizer
from app.apis.quiz.schemas import PingResponse
from app.core.config import settings
from app.core.errors import InputValidationError
from app.core.logging import get_logger


logger = get_logger(__name__)

router = APIRouter()


class TTSRequest(BaseModel):
    text: Optional[str] = None


@router.get(
    f"/{settings.app.api_prefix}/tts/ping",
    response_model=PingResponse,
    tags=["tts"],
)
async def ping() -> PingResponse:
    return PingResponse(status="tts route is alive")


@router.post(
    f"/{settings.app.api_prefix}/tts",
    response_class=Response,
    responses={200: {"content": {"audio/mpeg": {}}}},
    tags=["tts"],
)
async def text_to_speech(req: TTSRequest, synthesizer: Synthesizer) -> Response:
    if not req.text:
        raise InputValidationError("Text is required for text-to-speech conversion")

    logger.info("Received TTS request (%d chars)", len(req.text))
    audio = await synthesizer.synthesize(req.text)
    return Response(content=audio, media_type="audio/mpeg")
