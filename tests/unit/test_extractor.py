"""
Unit tests for locating the JSON array in raw model output.
"""

import pytest

from app.core.errors import ExtractionError
from app.modules.generation.extractor import extract_json_array, strip_code_fences


class TestExtractJsonArray:
    def test_plain_array_returned_unchanged(self):
        assert extract_json_array('[{"a": 1}]') == '[{"a": 1}]'

    def test_language_tagged_fence(self):
        raw = '```json\n[{"front": "a", "back": "b"}]\n```'
        assert extract_json_array(raw) == '[{"front": "a", "back": "b"}]'

    def test_bare_fence(self):
        raw = "```\n[1, 2, 3]\n```"
        assert extract_json_array(raw) == "[1, 2, 3]"

    def test_surrounding_prose_is_cut(self):
        raw = "Sure! Here are your questions:\n[1, [2]]\nHope this helps."
        assert extract_json_array(raw) == "[1, [2]]"

    def test_whitespace_is_trimmed(self):
        assert extract_json_array("   \n [] \n\t") == "[]"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "I cannot help with that.",
            '{"questions": 1}',
            "only an opening [ bracket",
            "only a closing ] bracket",
            "] reversed [",
        ],
    )
    def test_missing_array_raises(self, raw):
        with pytest.raises(ExtractionError, match="No JSON array found"):
            extract_json_array(raw)

    def test_idempotent_under_refencing(self):
        raw = 'text before ```json\n[{"x": "y"}]\n``` text after'
        once = extract_json_array(raw)
        again = extract_json_array("```json\n" + once + "\n```")
        assert once == again == '[{"x": "y"}]'


def test_strip_code_fences_keeps_inner_text():
    assert strip_code_fences("```javascript\nabc\n```") == "\nabc\n"
