from __future__ import annotations

from pydantic import BaseModel, Field
from typing import Optional

from app.modules.quiz.models import QuizItem


class QuizRequest(BaseModel):
    content: Optional[str] = Field(None, description="Document text to quiz on")


class QuizResponse(BaseModel):
    quiz: list[QuizItem]
    degraded: bool = False
    note: Optional[str] = None


class PingResponse(BaseModel):
    status: str
