"""Tests for the command-line interface."""
import pytest
from typer.testing import CliRunner

from nova.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_remote_provider(monkeypatch):
    """Keep CLI runs offline."""
    monkeypatch.setenv("LLM_PROVIDER", "gemini")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)


def test_zones_lists_aliases():
    result = runner.invoke(app, ["zones"])
    assert result.exit_code == 0
    assert "tokyo" in result.stdout
    assert "Asia/Tokyo" in result.stdout


def test_ask_provenance():
    result = runner.invoke(app, ["ask", "who made you"])
    assert result.exit_code == 0
    assert "I was developed by Kartik, Rahul, Manjunath and Prathyaksha." in result.stdout


def test_ask_time():
    result = runner.invoke(app, ["ask", "what time is it in utc"])
    assert result.exit_code == 0
    assert "Current time:" in result.stdout
    assert "UTC" in result.stdout


def test_ask_without_provider_fails():
    result = runner.invoke(app, ["ask", "tell me a joke"])
    assert result.exit_code == 1


def test_ask_blank():
    result = runner.invoke(app, ["ask", "   "])
    assert result.exit_code == 1


def test_unknown_log_level_is_rejected():
    result = runner.invoke(app, ["ask", "--log-level", "loud", "who made you"])
    assert result.exit_code == 2
