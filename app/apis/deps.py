from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Callable

from fastapi import Depends

from app.core.config import settings
from app.modules.documents.store import DocumentStore
from app.modules.generation.client import GenerationClient
from app.modules.generation.fallbacks import FallbackTable, load_fallbacks
from app.modules.tts.service import SpeechSynthesizer


@lru_cache
def get_generation_client() -> GenerationClient:
    """Process-wide Gemini client; raises ConfigurationError until a key is set."""
    return GenerationClient.from_settings(settings.gemini)


def get_client_provider() -> Callable[[], GenerationClient]:
    """Deferred access to the Gemini client; call it once input checks pass."""
    return get_generation_client


@lru_cache
def get_fallbacks() -> FallbackTable:
    return load_fallbacks(settings.generation.fallback_content_file)


def get_speech_synthesizer() -> SpeechSynthesizer:
    return SpeechSynthesizer(settings.tts)


@lru_cache
def get_document_store() -> DocumentStore:
    return DocumentStore(settings.supabase)


ClientProvider = Annotated[Callable[[], GenerationClient], Depends(get_client_provider)]
Fallbacks = Annotated[FallbackTable, Depends(get_fallbacks)]
Synthesizer = Annotated[SpeechSynthesizer, Depends(get_speech_synthesizer)]
Documents = Annotated[DocumentStore, Depends(get_document_store)]
