"""Voice input and output.

Abstract capabilities plus the controller that exposes speech input to a
session. Concrete local engines (WhisperRecognizer, PiperSynthesizer)
import their audio libraries lazily.
"""

from .base import RecognitionConfig, SilentSynthesizer, SpeechRecognizer, SpeechSynthesizer
from .controller import VoiceInputController
from .piper import PiperSynthesizer
from .whisper import WhisperRecognizer

__all__ = [
    "PiperSynthesizer",
    "RecognitionConfig",
    "SilentSynthesizer",
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "VoiceInputController",
    "WhisperRecognizer",
]
