"""Voice input state machine.

Wraps a SpeechRecognizer into start/stop plus an observable listening
flag, and forwards final transcripts to a handler (normally the
session's spoken-submission path).
"""

from collections.abc import Callable
from functools import partial
from typing import Any

from ..errors import CapabilityUnavailable
from .base import RecognitionConfig, SpeechRecognizer


class VoiceInputController:
    """Start/stop/listening wrapper around a speech recognizer.

    Events from an activation that has been superseded are ignored, so a
    late callback can never flip the flag of a newer activation.
    """

    def __init__(
        self,
        recognizer: SpeechRecognizer | None,
        on_transcript: Callable[[str], Any],
        config: RecognitionConfig | None = None,
        on_change: Callable[[bool], None] | None = None,
    ):
        """Initialize the controller.

        Args:
            recognizer: Recognition capability, or None on hosts without one
            on_transcript: Called with each non-empty final transcript
            config: Recognizer configuration (single utterance, final
                    results only, en-US by default)
            on_change: Called with the new listening value whenever it flips
        """
        self._recognizer = recognizer
        self._on_transcript = on_transcript
        self._config = config or RecognitionConfig()
        self._on_change = on_change
        self._listening = False
        self._activation = 0
        self._debug_callback: Any | None = None

    @property
    def listening(self) -> bool:
        return self._listening

    @property
    def config(self) -> RecognitionConfig:
        return self._config

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "VoiceInput", message)

    def is_available(self) -> bool:
        """Whether speech input can be started on this host."""
        return self._recognizer is not None and self._recognizer.is_available()

    def start(self) -> None:
        """Activate the recognizer.

        Raises:
            CapabilityUnavailable: If no recognizer is available; the
                listening flag is left unchanged
        """
        if self._recognizer is None:
            raise CapabilityUnavailable("Speech recognition", "no recognizer configured")
        if not self._recognizer.is_available():
            raise CapabilityUnavailable("Speech recognition", "not supported on this host")
        if self._listening:
            return

        self._activation += 1
        activation = self._activation
        self._set_listening(True)
        try:
            self._recognizer.start(
                self._config,
                on_result=partial(self._handle_result, activation),
                on_error=partial(self._handle_error, activation),
                on_end=partial(self._handle_end, activation),
            )
        except (OSError, RuntimeError) as e:
            self._set_listening(False)
            raise CapabilityUnavailable("Speech recognition", str(e)) from e
        self._debug("info", f"Listening ({self._config.locale})")

    def stop(self) -> None:
        """Request early deactivation."""
        if self._listening and self._recognizer is not None:
            self._recognizer.stop()

    def _set_listening(self, value: bool) -> None:
        if self._listening == value:
            return
        self._listening = value
        if self._on_change:
            self._on_change(value)

    def _handle_result(self, activation: int, transcript: str) -> None:
        if activation != self._activation:
            return
        self._set_listening(False)
        transcript = transcript.strip()
        if not transcript:
            self._debug("debug", "Empty transcript ignored")
            return
        self._debug("info", f"Heard: {transcript!r}")
        self._on_transcript(transcript)

    def _handle_error(self, activation: int, code: str) -> None:
        if activation != self._activation:
            return
        self._debug("warning", f"Speech recognition error: {code}")
        self._set_listening(False)

    def _handle_end(self, activation: int) -> None:
        if activation != self._activation:
            return
        self._set_listening(False)
