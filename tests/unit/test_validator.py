"""
Unit tests for parsing and filtering generated items.
"""

import json

import pytest

from app.core.errors import ParseError, SchemaError
from app.modules.generation.models import ItemKind
from app.modules.generation.validator import parse_json_array, validate_items
from tests.support import MCQ


def _dump(items) -> str:
    return json.dumps(items)


class TestParseJsonArray:
    def test_malformed_json_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_json_array('[{"question": "unterminated}]')

    def test_trailing_comma_is_malformed(self):
        with pytest.raises(ParseError):
            parse_json_array("[1, 2,]")

    def test_object_is_not_an_array(self):
        # brackets can match inside an object, e.g. '{"a": [1]}' sliced oddly
        with pytest.raises(SchemaError, match="Response is not an array"):
            parse_json_array('{"a": [1]}')


class TestQuizValidation:
    def test_valid_item_normalized_with_type(self):
        raw = {k: v for k, v in MCQ.items() if k != "type"}
        items = validate_items(ItemKind.QUIZ, _dump([raw]))
        assert [i.model_dump() for i in items] == [MCQ]

    def test_empty_array_rejected(self):
        with pytest.raises(SchemaError, match="No valid questions found"):
            validate_items(ItemKind.QUIZ, "[]")

    def test_all_malformed_rejected(self):
        bad = [
            {"question": "Q", "options": ["A", "B", "C"], "answer": "A"},
            {"question": "Q", "options": ["A", "B", "C", "D"], "answer": "E"},
        ]
        with pytest.raises(SchemaError, match="No valid questions found"):
            validate_items(ItemKind.QUIZ, _dump(bad))

    def test_keeps_well_formed_subset_in_order(self):
        first = dict(MCQ, question="first")
        second = dict(MCQ, question="second", answer="D")
        raw = [
            "not an object",
            first,
            {"type": "open", "question": "Explain.", "answer": "Because"},
            dict(MCQ, options=["A", "B", "C", "D", "E"]),
            dict(MCQ, options=["A", "A", "C", "D"]),
            dict(MCQ, answer=1),
            dict(MCQ, question=""),
            dict(MCQ, options="A,B,C,D"),
            second,
            None,
        ]
        items = validate_items(ItemKind.QUIZ, _dump(raw))
        assert [i.question for i in items] == ["first", "second"]

    def test_every_survivor_satisfies_invariants(self):
        raw = [MCQ, dict(MCQ, answer="Z"), dict(MCQ, options=[1, 2, 3, 4])]
        for item in validate_items(ItemKind.QUIZ, _dump(raw)):
            assert len(item.options) == 4
            assert item.answer in item.options
            assert item.type == "mcq"


class TestFlashcardValidation:
    def test_fewer_than_three_raw_items_rejected(self):
        cards = [{"front": "a", "back": "b"}, {"front": "c", "back": "d"}]
        with pytest.raises(SchemaError, match="Not enough valid flashcards returned"):
            validate_items(ItemKind.FLASHCARDS, _dump(cards))

    def test_three_raw_items_one_valid_survives(self):
        cards = [
            {"front": "  ", "back": "b"},
            {"front": "What is DNA?", "back": "Genetic material."},
            {"front": "x"},
        ]
        items = validate_items(ItemKind.FLASHCARDS, _dump(cards))
        assert [i.front for i in items] == ["What is DNA?"]

    def test_none_valid_rejected(self):
        cards = [{"front": "", "back": ""}, {"front": 1, "back": 2}, {}]
        with pytest.raises(SchemaError, match="No valid flashcards found"):
            validate_items(ItemKind.FLASHCARDS, _dump(cards))

    def test_sides_are_kept_verbatim(self):
        cards = [{"front": " a ", "back": "b"}] * 3
        items = validate_items(ItemKind.FLASHCARDS, _dump(cards))
        assert all(i.front == " a " for i in items)
        for item in items:
            assert item.front.strip() and item.back.strip()
