from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from app.apis.deps import Documents
from app.core.config import settings


router = APIRouter()


@router.get(
    f"/{settings.app.api_prefix}/documents",
    response_model=list[dict[str, Any]],
    tags=["documents"],
)
async def list_documents(store: Documents) -> list[dict[str, Any]]:
    return await store.list_documents()
