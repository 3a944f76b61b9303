"""Pytest configuration and shared fixtures."""
import asyncio
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from nova.errors import RemoteGenerationError
from nova.intent import IntentClassifier
from nova.llm import GenerationProvider, GenerationResult
from nova.session import SessionConfig
from nova.voice import RecognitionConfig, SpeechRecognizer, SpeechSynthesizer

# Monday, 15:07 UTC
FIXED_NOW = datetime(2026, 10, 19, 15, 7, tzinfo=timezone.utc)


class FakeGenerator(GenerationProvider):
    """In-memory generation provider that records prompts."""

    def __init__(
        self,
        reply: str = "Why did the chicken cross the road?",
        error: Exception | None = None,
        delay: float = 0.0,
    ):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.prompts: list[str] = []
        self.closed = False

    @property
    def name(self) -> str:
        return "fake"

    @property
    def model(self) -> str:
        return "fake-model"

    async def complete(self, prompt: str, temperature: float = 0.7, max_tokens: int | None = None, **kwargs: Any) -> GenerationResult:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return GenerationResult(content=self.reply, model=self.model)

    async def close(self) -> None:
        self.closed = True


class FakeRecognizer(SpeechRecognizer):
    """Recognizer driven by the test through emit_* helpers."""

    def __init__(self, available: bool = True, start_error: Exception | None = None):
        self.available = available
        self.start_error = start_error
        self.config: RecognitionConfig | None = None
        self.starts = 0
        self.stops = 0
        self._callbacks: tuple[Callable, Callable, Callable] | None = None
        self.history: list[tuple[Callable, Callable, Callable]] = []

    def is_available(self) -> bool:
        return self.available

    def start(self, config, on_result, on_error, on_end) -> None:
        if self.start_error is not None:
            raise self.start_error
        self.starts += 1
        self.config = config
        self._callbacks = (on_result, on_error, on_end)
        self.history.append(self._callbacks)

    def stop(self) -> None:
        self.stops += 1

    def emit_result(self, transcript: str) -> None:
        on_result, _, on_end = self._callbacks
        on_result(transcript)
        on_end()

    def emit_error(self, code: str) -> None:
        _, on_error, on_end = self._callbacks
        on_error(code)
        on_end()


class FakeSynthesizer(SpeechSynthesizer):
    """Synthesizer that records what it was asked to say."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.spoken: list[str] = []

    def is_available(self) -> bool:
        return True

    def speak(self, text: str) -> None:
        if self.error is not None:
            raise self.error
        self.spoken.append(text)


@pytest.fixture
def fixed_now():
    """Return a fixed instant (Monday 2026-10-19 15:07 UTC)."""
    return FIXED_NOW


@pytest.fixture
def classifier():
    """Classifier whose clock is frozen at FIXED_NOW."""
    return IntentClassifier(clock=lambda: FIXED_NOW)


@pytest.fixture
def fast_config():
    """Session config with near-zero canned reply delays."""
    return SessionConfig(identity_delay=0.01, provenance_delay=0.0)


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def failing_generator():
    return FakeGenerator(error=RemoteGenerationError("quota exceeded", provider="fake"))


@pytest.fixture
def recognizer():
    return FakeRecognizer()


@pytest.fixture
def synthesizer():
    return FakeSynthesizer()


@pytest.fixture
def debug_log():
    """Collect (level, component, message) tuples from a debug callback."""
    entries: list[tuple[str, str, str]] = []

    def _callback(level: str, component: str, message: str) -> None:
        entries.append((level, component, message))

    _callback.entries = entries
    return _callback
