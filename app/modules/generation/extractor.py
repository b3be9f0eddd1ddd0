"""Locate the JSON array inside a raw model completion.

Models often wrap their answer in markdown fences or add a sentence before or
after it. This step only cuts out the ``[...]`` span; parsing happens in
``validator`` so a missing array and malformed JSON stay distinct failures.
"""

from __future__ import annotations

import re

from app.core.errors import ExtractionError

# ```json, ```JSON, ```javascript, or a bare ```
_FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*")


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text)


def extract_json_array(raw: str) -> str:
    """Return the substring from the first ``[`` to the last ``]`` inclusive."""
    text = strip_code_fences((raw or "").strip())
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or end < start:
        raise ExtractionError("No JSON array found in AI response")
    return text[start : end + 1]
