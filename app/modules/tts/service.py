"""Text-to-speech with ElevenLabs first and Google Cloud TTS as fallback.

Both providers are called over their REST APIs with ``httpx``. Whichever is
configured first and succeeds wins; with neither available the caller gets
``ServiceUnavailableError``.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

import httpx

from app.core.config import TTSSettings
from app.core.errors import ServiceUnavailableError, UpstreamError
from app.core.logging import get_logger

logger = get_logger(__name__)

ELEVENLABS_URL = "https://api.elevenlabs.io/v1/text-to-speech/{voice_id}"
GOOGLE_TTS_URL = "https://texttospeech.googleapis.com/v1/text:synthesize"


class SpeechSynthesizer:
    def __init__(
        self,
        cfg: TTSSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.cfg = cfg
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.cfg.timeout_seconds, transport=self._transport)

    async def synthesize(self, text: str) -> bytes:
        """Return MP3 bytes for ``text`` (truncated to the configured limit)."""
        limited = text[: self.cfg.max_text_chars]

        if self.cfg.elevenlabs_api_key:
            try:
                logger.info("Using ElevenLabs for TTS")
                return await self._elevenlabs(limited)
            except (httpx.HTTPError, UpstreamError) as e:
                logger.error("ElevenLabs TTS error: %s", e)

        if self.cfg.google_api_key:
            logger.info("Using Google TTS as fallback")
            return await self._google(limited)

        raise ServiceUnavailableError("Text-to-speech service is not configured")

    async def _elevenlabs(self, text: str) -> bytes:
        async with self._client() as client:
            response = await client.post(
                ELEVENLABS_URL.format(voice_id=self.cfg.elevenlabs_voice_id),
                headers={
                    "Accept": "audio/mpeg",
                    "xi-api-key": self.cfg.elevenlabs_api_key or "",
                },
                json={
                    "text": text,
                    "model_id": self.cfg.elevenlabs_model_id,
                    "voice_settings": {
                        "stability": 0.75,
                        "similarity_boost": 0.75,
                    },
                },
            )
        if response.status_code != 200:
            raise UpstreamError(f"ElevenLabs API error: {response.status_code}")
        return response.content

    async def _google(self, text: str) -> bytes:
        try:
            async with self._client() as client:
                response = await client.post(
                    GOOGLE_TTS_URL,
                    params={"key": self.cfg.google_api_key},
                    json={
                        "input": {"text": text},
                        "voice": {
                            "languageCode": self.cfg.language_code,
                            "ssmlGender": "NEUTRAL",
                        },
                        "audioConfig": {"audioEncoding": "MP3"},
                    },
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise UpstreamError(f"Google TTS error: {e}") from e

        try:
            audio = response.json().get("audioContent")
        except (ValueError, AttributeError) as e:
            raise UpstreamError("Google TTS returned an unexpected body") from e
        if not audio:
            raise UpstreamError("Google TTS returned no audio")
        try:
            return base64.b64decode(audio)
        except binascii.Error as e:
            raise UpstreamError("Google TTS returned malformed audio") from e
