"""Conversation session state machine.

Owns the message log and decides, per utterance, whether a local rule
or the remote generation provider answers it.

States:
    IDLE -> AWAITING_LOCAL_RESPONSE -> IDLE                  (local rule)
    IDLE -> AWAITING_LOCAL_RESPONSE -> AWAITING_REMOTE_RESPONSE -> IDLE

All mutation happens on the event loop thread. Canned-reply delays and
the remote call run as asyncio tasks owned by the session, so close()
can cancel them before they touch a torn-down log.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from ..errors import RemoteGenerationError
from ..intent import IntentClassifier, IntentKind, IntentMatch
from ..llm import GenerationProvider
from ..prompts import build_concise_answer_prompt
from ..voice import RecognitionConfig, SpeechRecognizer, SpeechSynthesizer, VoiceInputController
from .models import Message, Role, SessionConfig, SessionState

SessionListener = Callable[["ConversationSession"], None]


class ConversationSession:
    """One conversation between a user and the assistant.

    Hidden design decisions:
    - Turn state machine and re-entrancy policy (busy submissions are ignored)
    - Scheduling of delayed canned replies
    - Remote prompt construction
    - When spoken output is produced

    Example:
        session = ConversationSession(generator=provider)
        session.submit("who made you")
        await session.wait_idle()
        session.messages[-1].text  # canned provenance reply
    """

    def __init__(
        self,
        generator: GenerationProvider | None = None,
        classifier: IntentClassifier | None = None,
        synthesizer: SpeechSynthesizer | None = None,
        recognizer: SpeechRecognizer | None = None,
        config: SessionConfig | None = None,
        recognition_config: RecognitionConfig | None = None,
    ):
        """Initialize the session.

        Args:
            generator: Remote generation provider, created once at bootstrap
                       (None means unmatched utterances get no reply)
            classifier: Local rule classifier
            synthesizer: Speech output used for turns that began as speech
            recognizer: Speech input capability (None on text-only hosts)
            config: Canned replies and delays
            recognition_config: Recognizer settings for voice input
        """
        self._generator = generator
        self._classifier = classifier or IntentClassifier()
        self._synthesizer = synthesizer
        self._config = config or SessionConfig()
        self._messages: list[Message] = []
        self._state = SessionState.IDLE
        self._pending: asyncio.Task | None = None
        self._listeners: list[SessionListener] = []
        self._closed = False
        self._debug_callback: Any | None = None
        self._voice = VoiceInputController(
            recognizer,
            on_transcript=self._submit_spoken,
            config=recognition_config,
            on_change=lambda _listening: self._notify(),
        )

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of the log in append order."""
        return tuple(self._messages)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def awaiting_response(self) -> bool:
        """True from accepting an utterance until its reply (or failure)."""
        return self._state != SessionState.IDLE

    @property
    def listening(self) -> bool:
        return self._voice.listening

    @property
    def voice_input_available(self) -> bool:
        return self._voice.is_available()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def config(self) -> SessionConfig:
        return self._config

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener called after every state or log change.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback used as the observability sink.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'

        The callback is propagated to the classifier, the voice controller
        and any synthesizer that accepts one.
        """
        self._debug_callback = callback
        self._classifier.set_debug_callback(callback)
        self._voice.set_debug_callback(callback)
        if hasattr(self._synthesizer, "set_debug_callback"):
            self._synthesizer.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Session", message)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ------------------------------------------------------------------
    # Turn handling
    # ------------------------------------------------------------------

    def submit(self, text: str, from_voice: bool = False) -> bool:
        """Accept an utterance and start its turn.

        Date/time questions are answered synchronously and need no event
        loop; every other turn is scheduled as a task and so requires one
        (RuntimeError is raised before the log is touched otherwise).
        Blank text is ignored without any state change. Submissions while
        a response is pending are ignored as well, leaving the log untouched.

        Args:
            text: The utterance as typed or transcribed
            from_voice: Whether the reply should also be spoken

        Returns:
            True if the utterance was accepted
        """
        if text is None or not text.strip():
            return False
        if self._closed:
            self._debug("warning", "Submission to a closed session ignored")
            return False
        if self._state != SessionState.IDLE:
            self._debug("warning", f"Submission ignored while {self._state.value}")
            return False

        match = self._classifier.classify(text)
        # Raises before any mutation when a deferred turn has no loop to run on
        loop = None if match.kind == IntentKind.DATE_TIME else asyncio.get_running_loop()

        self._append(Role.USER, text)
        self._set_state(SessionState.AWAITING_LOCAL_RESPONSE)
        self._debug("info", f"Classified as {match.kind.value}")

        if loop is None:
            self._complete_turn(match.text or "", from_voice)
            return True

        self._pending = loop.create_task(self._run_turn(text, match, from_voice))
        return True

    def start_listening(self) -> None:
        """Start speech input.

        Raises:
            CapabilityUnavailable: If speech recognition is unavailable
        """
        self._voice.start()

    def stop_listening(self) -> None:
        """Stop speech input early."""
        self._voice.stop()

    async def wait_idle(self) -> None:
        """Wait until no turn is in flight, including turns started by listeners."""
        while self._pending is not None and not self._pending.done():
            await asyncio.wait({self._pending})

    def close(self) -> None:
        """Tear the session down, cancelling any scheduled continuation."""
        if self._closed:
            return
        self._closed = True
        self._voice.stop()
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._listeners.clear()

    def _submit_spoken(self, transcript: str) -> None:
        self.submit(transcript, from_voice=True)

    async def _run_turn(self, text: str, match: IntentMatch, from_voice: bool) -> None:
        try:
            if match.kind == IntentKind.IDENTITY:
                await asyncio.sleep(self._config.identity_delay)
                self._complete_turn(self._config.identity_response, from_voice)
            elif match.kind == IntentKind.PROVENANCE:
                await asyncio.sleep(self._config.provenance_delay)
                self._complete_turn(self._config.provenance_response, from_voice)
            else:
                self._set_state(SessionState.AWAITING_REMOTE_RESPONSE)
                reply = await self._generate(text)
                if reply is None:
                    self._set_state(SessionState.IDLE)
                else:
                    self._complete_turn(reply, from_voice)
        finally:
            # A listener may already have started the next turn
            if self._pending is asyncio.current_task():
                self._pending = None

    async def _generate(self, text: str) -> str | None:
        """Call the remote provider; returns None when the turn failed."""
        if self._generator is None:
            self._debug("error", "No remote generation provider configured")
            return None

        prompt = build_concise_answer_prompt(text)
        self._debug("debug", f"Sending prompt to {self._generator.name} ({self._generator.model})")
        try:
            return await self._generator.generate(prompt)
        except RemoteGenerationError as e:
            self._debug("error", f"Remote generation failed: {e}")
        except Exception as e:
            self._debug("error", f"Unexpected remote generation error: {e!r}")
        return None

    def _complete_turn(self, reply: str, from_voice: bool) -> None:
        self._append(Role.ASSISTANT, reply)
        try:
            if from_voice:
                self._speak(reply)
        finally:
            self._set_state(SessionState.IDLE)

    def _speak(self, text: str) -> None:
        if self._synthesizer is None:
            return
        try:
            self._synthesizer.speak(text)
        except (OSError, RuntimeError) as e:
            self._debug("warning", f"Speech output failed: {e}")
        except Exception as e:
            self._debug("warning", f"Unexpected speech output error: {e!r}")

    def _append(self, role: Role, text: str) -> None:
        self._messages.append(Message(role=role, text=text))
        self._notify()

    def _set_state(self, state: SessionState) -> None:
        if self._state == state:
            return
        self._state = state
        self._notify()
