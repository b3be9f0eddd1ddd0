from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel


class ItemKind(str, Enum):
    QUIZ = "quiz"
    FLASHCARDS = "flashcards"


ItemT = TypeVar("ItemT", bound=BaseModel)


@dataclass
class GenerationResult(Generic[ItemT]):
    """Items produced for one request; ``degraded`` marks fallback content."""

    items: list[ItemT] = field(default_factory=list)
    degraded: bool = False
    note: Optional[str] = None
