from __future__ import annotations

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from app.apis.deps import ClientProvider
from app.apis.quiz.schemas import PingResponse
from app.core.config import settings
from app.core.errors import InputValidationError
from app.core.logging import get_logger
from app.modules.summarize.summarizer import summarize_document


logger = get_logger(__name__)

router = APIRouter()


class SummarizeRequest(BaseModel):
    document_url: Optional[str] = Field(None, alias="documentUrl")

    model_config = ConfigDict(populate_by_name=True)


class SummarizeResponse(BaseModel):
    summary: Optional[str] = None
    degraded: bool = False
    note: Optional[str] = None


@router.get(
    f"/{settings.app.api_prefix}/summarize/ping",
    response_model=PingResponse,
    tags=["summarize"],
)
async def ping() -> PingResponse:
    return PingResponse(status="summarize route is alive")


@router.post(
    f"/{settings.app.api_prefix}/summarize",
    response_model=SummarizeResponse,
    tags=["summarize"],
)
async def summarize(
    req: SummarizeRequest, get_client: ClientProvider
) -> SummarizeResponse:
    url = (req.document_url or "").strip()
    if not url:
        raise InputValidationError("No documentUrl provided")

    logger.info("Summarizing document %s", url)
    result = await summarize_document(
        url, get_client(), max_chars=settings.generation.summary_max_document_chars
    )
    return SummarizeResponse(
        summary=result.summary, degraded=result.degraded, note=result.note
    )
