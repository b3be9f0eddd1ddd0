"""Test doubles for the generative model and Supabase.

``ScriptedModel`` plugs a pydantic-ai ``FunctionModel`` into
``GenerationClient`` and records every prompt it sees, so no test reaches
Gemini. ``FakeSupabase`` does the same for the document store.
"""

from __future__ import annotations

import json
from types import SimpleNamespace

from pydantic_ai.messages import (
    ModelMessage,
    ModelRequest,
    ModelResponse,
    TextPart,
    UserPromptPart,
)
from pydantic_ai.models.function import AgentInfo, FunctionModel

from app.modules.generation.client import GenerationClient


def _last_prompt(messages: list[ModelMessage]) -> str:
    for message in reversed(messages):
        if isinstance(message, ModelRequest):
            for part in message.parts:
                if isinstance(part, UserPromptPart) and isinstance(part.content, str):
                    return part.content
    return ""


class ScriptedModel:
    """Replies with canned text (or raises a canned exception) per call."""

    def __init__(self, *replies: str | Exception) -> None:
        self.replies = list(replies)
        self.prompts: list[str] = []

    def respond(self, messages: list[ModelMessage], info: AgentInfo) -> ModelResponse:
        self.prompts.append(_last_prompt(messages))
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return ModelResponse(parts=[TextPart(content=reply)])

    @property
    def calls(self) -> int:
        return len(self.prompts)

    def client(self, timeout: float = 5.0) -> GenerationClient:
        return GenerationClient(model=FunctionModel(self.respond), timeout=timeout)


def fenced(items: list) -> str:
    return "```json\n" + json.dumps(items) + "\n```"


MCQ = {
    "type": "mcq",
    "question": "Q",
    "options": ["A", "B", "C", "D"],
    "answer": "A",
}

# exactly 60 characters
CONTENT_60 = "Photosynthesis turns light energy into chemical energy today"


class FakeSupabase:
    """Stands in for ``supabase.Client``: one table and one storage bucket.

    ``signed`` maps a storage path to the dict ``create_signed_url`` returns;
    any other path raises, as storage does for a missing object.
    """

    def __init__(self, rows=None, signed=None, listing_error=None):
        self.rows = rows if rows is not None else []
        self.signed = signed or {}
        self.listing_error = listing_error
        self.tables: list[str] = []
        self.buckets: list[str] = []
        self.signed_requests: list[tuple[str, int]] = []

    def table(self, name):
        self.tables.append(name)
        return _FakeQuery(self)

    @property
    def storage(self):
        return _FakeStorage(self)


class _FakeQuery:
    def __init__(self, owner: FakeSupabase):
        self.owner = owner

    def select(self, *columns):
        return self

    def execute(self):
        if self.owner.listing_error is not None:
            raise self.owner.listing_error
        return SimpleNamespace(data=self.owner.rows)


class _FakeStorage:
    def __init__(self, owner: FakeSupabase):
        self.owner = owner

    def from_(self, bucket):
        self.owner.buckets.append(bucket)
        return self

    def create_signed_url(self, path, expires_in):
        self.owner.signed_requests.append((path, expires_in))
        if path not in self.owner.signed:
            raise RuntimeError(f"Object not found: {path}")
        return self.owner.signed[path]
