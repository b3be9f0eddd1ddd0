"""Pydantic models for quiz (MCQ) items.

Text fields are strict so that values the LLM returns with the wrong JSON type
(numbers for text, strings for lists) are rejected rather than coerced.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, StrictStr, field_validator, model_validator

OPTIONS_PER_QUESTION = 4


class QuizItem(BaseModel):
    """A single multiple-choice question; ``answer`` is one of ``options``."""

    type: Literal["mcq"] = "mcq"
    question: StrictStr
    options: list[StrictStr]
    answer: StrictStr

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question is blank")
        return v

    @field_validator("options")
    @classmethod
    def _four_distinct_options(cls, v: list[str]) -> list[str]:
        if len(v) != OPTIONS_PER_QUESTION:
            raise ValueError(f"expected {OPTIONS_PER_QUESTION} options, got {len(v)}")
        if len(set(v)) != len(v):
            raise ValueError("options are not distinct")
        return v

    @model_validator(mode="after")
    def _answer_among_options(self) -> "QuizItem":
        if self.answer not in self.options:
            raise ValueError("answer is not one of the options")
        return self
