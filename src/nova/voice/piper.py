"""Local speech synthesis: Piper TTS binary plus sounddevice playback.

Piper is run once per utterance with --output-raw, producing 16-bit mono
PCM that is played on the default output device. Playback happens on a
worker thread so speak() returns immediately.

Requires the 'voice' extra and a Piper binary with an .onnx voice model.
"""

import importlib.util
import shutil
import subprocess
import threading
from pathlib import Path
from typing import Any

from .base import SpeechSynthesizer

PIPER_TIMEOUT_SECONDS = 60


class PiperSynthesizer(SpeechSynthesizer):
    """Fire-and-forget Piper synthesizer.

    Utterances are played one at a time; failures are reported through
    the debug callback and otherwise dropped.
    """

    def __init__(
        self,
        voice_path: str | Path,
        piper_path: str = "piper",
        sample_rate: int = 22050,
    ):
        """Initialize the synthesizer.

        Args:
            voice_path: Path to the Piper .onnx voice model
            piper_path: Piper executable name or path
            sample_rate: Sample rate of the voice model's output
        """
        self._voice_path = Path(voice_path)
        self._piper_path = piper_path
        self._sample_rate = sample_rate
        self._playback_lock = threading.Lock()
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Piper", message)

    def is_available(self) -> bool:
        if shutil.which(self._piper_path) is None and not Path(self._piper_path).is_file():
            return False
        if not self._voice_path.is_file():
            return False
        return importlib.util.find_spec("sounddevice") is not None

    def speak(self, text: str) -> None:
        if not text.strip():
            return
        threading.Thread(target=self._speak_blocking, args=(text,), daemon=True).start()

    def _synthesize(self, text: str) -> bytes:
        result = subprocess.run(
            [self._piper_path, "--model", str(self._voice_path), "--output-raw"],
            input=text.encode("utf-8"),
            capture_output=True,
            check=True,
            timeout=PIPER_TIMEOUT_SECONDS,
        )
        return result.stdout

    def _speak_blocking(self, text: str) -> None:
        with self._playback_lock:
            try:
                pcm = self._synthesize(text)
            except (OSError, subprocess.SubprocessError) as e:
                self._debug("warning", f"Piper synthesis failed: {e}")
                return

            import numpy as np
            try:
                import sounddevice as sd
            except OSError as e:
                self._debug("warning", f"Audio output unavailable: {e}")
                return

            audio = np.frombuffer(pcm, dtype=np.int16)
            try:
                sd.play(audio, samplerate=self._sample_rate, blocking=True)
            except (sd.PortAudioError, ValueError) as e:
                self._debug("warning", f"Audio playback failed: {e}")
