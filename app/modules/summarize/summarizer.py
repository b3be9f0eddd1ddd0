"""Download a PDF, extract its text, and ask the model for a short summary."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Optional

import httpx
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from app.core.errors import DocumentFetchError, GenerationError
from app.core.logging import get_logger
from app.modules.generation.client import GenerationClient

logger = get_logger(__name__)

DEFAULT_MAX_DOCUMENT_CHARS = 15000
DEGRADED_NOTE = "Failed to summarize document. Please try again later."


@dataclass
class SummaryResult:
    summary: Optional[str]
    degraded: bool = False
    note: Optional[str] = None


async def fetch_document(
    url: str,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: float = 30.0,
) -> bytes:
    try:
        async with httpx.AsyncClient(
            timeout=timeout, transport=transport, follow_redirects=True
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise DocumentFetchError(f"File download failed: {e}") from e
    logger.info("Downloaded document (%d bytes)", len(response.content))
    return response.content


def extract_pdf_text(data: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [(p.extract_text() or "").replace("\x00", "") for p in reader.pages]
    except (PyPdfError, ValueError) as e:
        raise DocumentFetchError(f"Could not read PDF: {e}") from e
    text = "\n".join(pages).strip()
    if not text:
        raise DocumentFetchError("Document contains no extractable text")
    return text


def build_summary_prompt(text: str, *, max_chars: int = DEFAULT_MAX_DOCUMENT_CHARS) -> str:
    return (
        "Summarize the following document for a student in less than 200 words. "
        "Use simple, clear language:\n\n"
        f"{text[:max_chars]}"
    )


async def summarize_document(
    url: str,
    client: GenerationClient,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    max_chars: int = DEFAULT_MAX_DOCUMENT_CHARS,
) -> SummaryResult:
    try:
        data = await fetch_document(url, transport=transport)
        text = extract_pdf_text(data)
        logger.info("Extracted PDF text length: %d", len(text))
        summary = await client.generate(build_summary_prompt(text, max_chars=max_chars))
    except GenerationError as e:
        logger.warning("Summarize failed while %s: %s", e.stage, e.message)
        return SummaryResult(summary=None, degraded=True, note=DEGRADED_NOTE)
    return SummaryResult(summary=summary.strip())
