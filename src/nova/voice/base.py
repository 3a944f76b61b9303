"""Abstract speech capabilities.

The engine never talks to an audio device directly. It consumes two
narrow capabilities whose lifecycles are managed by the host:
- SpeechRecognizer: one utterance in, one transcript (or error) out
- SpeechSynthesizer: fire-and-forget text to speech
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field


class RecognitionConfig(BaseModel):
    """Fixed recognizer configuration used by the voice controller."""

    model_config = ConfigDict(frozen=True)

    continuous: bool = Field(default=False, description="Keep listening after the first utterance")
    interim_results: bool = Field(default=False, description="Emit partial transcripts")
    locale: str = Field(default="en-US", description="BCP 47 locale of the speaker")

    @property
    def language(self) -> str:
        """Two-letter language code derived from the locale ('en-US' -> 'en')."""
        return self.locale.split("-")[0].lower()


class SpeechRecognizer(ABC):
    """Speech-to-text capability.

    Each activation emits exactly one of on_result(transcript) or
    on_error(code), always followed by on_end(). Callbacks are delivered
    on the event loop thread that called start().
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Whether recognition can run on this host."""

    @abstractmethod
    def start(
        self,
        config: RecognitionConfig,
        on_result: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[], None],
    ) -> None:
        """Begin one recognition activation."""

    @abstractmethod
    def stop(self) -> None:
        """Request early deactivation; on_end still follows."""


class SpeechSynthesizer(ABC):
    """Text-to-speech capability. speak() never blocks the caller."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether synthesis can run on this host."""

    @abstractmethod
    def speak(self, text: str) -> None:
        """Queue text for playback and return immediately."""


class SilentSynthesizer(SpeechSynthesizer):
    """Synthesizer that discards everything (text-only hosts)."""

    def is_available(self) -> bool:
        return True

    def speak(self, text: str) -> None:
        pass
