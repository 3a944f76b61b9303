"""Tests for prompt loading."""
import pytest

from nova.prompts import build_concise_answer_prompt, clear_cache, load_prompt


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_cache()
    yield
    clear_cache()


def test_concise_answer_prompt():
    assert build_concise_answer_prompt("why is the sky blue?") == (
        "Please provide a concise and genuine answer to the following question. "
        "Keep your response brief and to the point: why is the sky blue?"
    )


def test_question_with_braces_is_inserted_verbatim():
    prompt = build_concise_answer_prompt("what does {x} mean")
    assert prompt.endswith("to the point: what does {x} mean")


def test_missing_prompt():
    with pytest.raises(FileNotFoundError, match="no_such_prompt"):
        load_prompt("no_such_prompt")


def test_working_directory_override(tmp_path, monkeypatch):
    (tmp_path / "prompts").mkdir()
    (tmp_path / "prompts" / "concise_answer.txt").write_text("Q: {question}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert build_concise_answer_prompt("hello") == "Q: hello"
