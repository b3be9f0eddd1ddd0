from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.modules.flashcards.models.flashcards import Flashcard


class FlashcardsRequest(BaseModel):
    content: Optional[str] = Field(None, description="Source text for the cards")
    topic: Optional[str] = Field(None, description="Topic used when no content is given")


class FlashcardsResponse(BaseModel):
    flashcards: list[Flashcard]
    degraded: bool = False
    note: Optional[str] = None
