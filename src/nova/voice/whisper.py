"""Local speech recognition: microphone capture plus faster-whisper.

Capture stops at the first pause after speech, when stop() is called,
or after max_seconds. Only single-utterance recognition is supported,
so RecognitionConfig.continuous and interim_results are not honoured.

Requires the 'voice' extra: pip install nova-chat[voice]
"""

import asyncio
import importlib.util
import threading
from collections.abc import Callable
from typing import Any

from .base import RecognitionConfig, SpeechRecognizer

BLOCK_SECONDS = 0.1


class WhisperRecognizer(SpeechRecognizer):
    """faster-whisper recognizer fed from the default input device.

    Hidden design decisions:
    - Energy-based end-of-utterance detection
    - Lazy model loading on first use (off the event loop)
    - Running blocking capture in a worker thread
    """

    def __init__(
        self,
        model_size: str = "base.en",
        sample_rate: int = 16000,
        max_seconds: float = 10.0,
        silence_seconds: float = 1.0,
        silence_threshold: float = 0.01,
        device: int | str | None = None,
    ):
        """Initialize the recognizer.

        Args:
            model_size: faster-whisper model name (base.en, small.en, ...)
            sample_rate: Capture sample rate in Hz
            max_seconds: Hard cap on a single capture
            silence_seconds: Trailing silence that ends an utterance
            silence_threshold: RMS level below which a block counts as silence
            device: sounddevice input device (None uses the default)
        """
        self._model_size = model_size
        self._sample_rate = sample_rate
        self._max_seconds = max_seconds
        self._silence_seconds = silence_seconds
        self._silence_threshold = silence_threshold
        self._device = device
        self._model: Any | None = None
        self._model_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._task: asyncio.Task | None = None

    def is_available(self) -> bool:
        if importlib.util.find_spec("faster_whisper") is None:
            return False
        if importlib.util.find_spec("sounddevice") is None:
            return False
        try:
            import sounddevice
        except OSError:
            # PortAudio shared library missing
            return False
        try:
            sounddevice.query_devices(kind="input")
        except (ValueError, sounddevice.PortAudioError):
            return False
        return True

    def start(
        self,
        config: RecognitionConfig,
        on_result: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[], None],
    ) -> None:
        """Begin capture; must be called from a running event loop."""
        if self._task is not None and not self._task.done():
            raise RuntimeError("Recognition already in progress")
        self._stop_event.clear()
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._listen(config, on_result, on_error, on_end))

    def stop(self) -> None:
        self._stop_event.set()

    async def _listen(
        self,
        config: RecognitionConfig,
        on_result: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[], None],
    ) -> None:
        try:
            transcript = await asyncio.to_thread(self._capture_and_transcribe, config)
        except (OSError, RuntimeError, ValueError) as e:
            on_error(f"audio-capture: {e}")
        else:
            if transcript:
                on_result(transcript)
            else:
                on_error("no-speech")
        finally:
            on_end()

    def _load_model(self) -> Any:
        with self._model_lock:
            if self._model is None:
                from faster_whisper import WhisperModel
                self._model = WhisperModel(self._model_size, device="cpu", compute_type="int8")
            return self._model

    def _capture_and_transcribe(self, config: RecognitionConfig) -> str:
        """Record one utterance and transcribe it (runs in a worker thread)."""
        import numpy as np
        import sounddevice as sd

        block_frames = int(self._sample_rate * BLOCK_SECONDS)
        max_blocks = int(self._max_seconds / BLOCK_SECONDS)
        blocks = []
        heard_speech = False
        silent_blocks = 0

        try:
            with sd.InputStream(
                samplerate=self._sample_rate,
                channels=1,
                dtype="float32",
                blocksize=block_frames,
                device=self._device,
            ) as stream:
                for _ in range(max_blocks):
                    if self._stop_event.is_set():
                        break
                    block, _overflowed = stream.read(block_frames)
                    samples = block[:, 0].copy()
                    blocks.append(samples)

                    rms = float(np.sqrt(np.mean(samples ** 2)))
                    if rms >= self._silence_threshold:
                        heard_speech = True
                        silent_blocks = 0
                    elif heard_speech:
                        silent_blocks += 1
                        if silent_blocks * BLOCK_SECONDS >= self._silence_seconds:
                            break
        except sd.PortAudioError as e:
            raise RuntimeError(f"Audio capture failed: {e}") from e

        if not heard_speech:
            return ""

        audio = np.concatenate(blocks)
        segments, _info = self._load_model().transcribe(audio, language=config.language)
        return " ".join(segment.text.strip() for segment in segments).strip()
