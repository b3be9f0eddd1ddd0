"""Supabase-backed document listing with signed download URLs.

Rows come from the documents table, URLs from the storage bucket. A signing
failure for one document leaves its ``url`` as None and does not fail the
listing.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from supabase import Client, create_client

from app.core.config import SupabaseSettings
from app.core.errors import ConfigurationError, UpstreamError
from app.core.logging import get_logger

logger = get_logger(__name__)


class DocumentStore:
    def __init__(self, cfg: SupabaseSettings, *, client: Optional[Client] = None) -> None:
        if not cfg.is_configured:
            raise ConfigurationError(
                "Supabase not configured. Set SUPABASE_URL and SUPABASE_KEY in your environment."
            )
        self.cfg = cfg
        self._sb = client if client is not None else create_client(cfg.url, cfg.key)

    async def list_documents(self) -> list[dict[str, Any]]:
        """Return every document row with a signed ``url`` attached."""
        try:
            result = await asyncio.to_thread(
                self._sb.table(self.cfg.documents_table).select("*").execute
            )
        except Exception as e:
            logger.error("Supabase error fetching documents: %s", e)
            raise UpstreamError("Failed to fetch documents from database") from e

        rows = result.data
        if not isinstance(rows, list):
            raise UpstreamError("Failed to fetch documents from database")

        documents = []
        for row in rows:
            if isinstance(row, dict):
                documents.append(row)
            else:
                logger.warning("Skipping malformed document row: %r", row)

        urls = await asyncio.gather(
            *(asyncio.to_thread(self._signed_url, doc.get("file_path")) for doc in documents)
        )
        return [{**doc, "url": url} for doc, url in zip(documents, urls)]

    def _signed_url(self, file_path: Any) -> Optional[str]:
        if not isinstance(file_path, str) or not file_path.strip():
            return None
        try:
            signed = self._sb.storage.from_(self.cfg.bucket).create_signed_url(
                file_path.lstrip("/"), self.cfg.signed_url_expiry_seconds
            )
        except Exception as e:
            logger.error("Failed to create signed URL for file_path %s: %s", file_path, e)
            return None
        if not isinstance(signed, dict):
            return None
        return signed.get("signedURL") or signed.get("signedUrl")
