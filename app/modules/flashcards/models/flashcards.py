"""Pydantic models for flashcard generation and validation."""

from pydantic import BaseModel, StrictStr, field_validator


class Flashcard(BaseModel):
    """Front/back study card; both sides must contain text."""

    front: StrictStr
    back: StrictStr

    @field_validator("front", "back")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("side is blank")
        return v
