"""
Smoke tests for the study-gen CLI.
"""

import json

import pytest

from app.modules.generation import cli
from app.modules.generation.client import GenerationClient
from tests.support import CONTENT_60, MCQ, ScriptedModel, fenced


@pytest.fixture
def scripted(monkeypatch):
    def _install(*replies):
        model = ScriptedModel(*replies)
        client = model.client()
        monkeypatch.setattr(
            GenerationClient, "from_settings", classmethod(lambda cls, cfg: client)
        )
        return model

    return _install


def test_quiz_command(scripted, capsys):
    scripted(fenced([MCQ]))
    assert cli.main(["quiz", "--content", CONTENT_60]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"quiz": [MCQ], "degraded": False}


def test_flashcards_command_degraded_exit_code(scripted, capsys):
    scripted("no cards here")
    assert cli.main(["flashcards", "--topic", "Cells"]) == 1
    out = json.loads(capsys.readouterr().out)
    assert out["degraded"] is True
    assert out["note"]


def test_content_file(scripted, capsys, tmp_path):
    model = scripted(fenced([MCQ]))
    source = tmp_path / "notes.txt"
    source.write_text(CONTENT_60, encoding="utf-8")
    assert cli.main(["quiz", "--content-file", str(source)]) == 0
    assert CONTENT_60 in model.prompts[0]


def test_flashcards_requires_input(scripted):
    scripted("[]")
    with pytest.raises(SystemExit):
        cli.main(["flashcards"])
