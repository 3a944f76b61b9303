"""Provider factory functions for CLI.

Centralizes creation of the generation provider, speech capabilities and
the console log sink from environment variables. Hides configuration
details from command implementations.
"""

import os
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from ..llm import GenerationProvider, create_generation_provider
from ..ui.config import LogLevel
from ..voice import PiperSynthesizer, SilentSynthesizer, SpeechRecognizer, SpeechSynthesizer, WhisperRecognizer

_console = Console(stderr=True)

# provider -> (api key variable, model variable, default model)
_PROVIDER_ENV = {
    "gemini": ("GEMINI_API_KEY", "GEMINI_MODEL", "gemini-2.0-flash"),
    "openai": ("OPENAI_API_KEY", "OPENAI_CHAT_MODEL", "gpt-4o-mini"),
    "deepseek": ("DEEPSEEK_API_KEY", "DEEPSEEK_MODEL", "deepseek-chat"),
    "anthropic": ("ANTHROPIC_API_KEY", "ANTHROPIC_MODEL", "claude-sonnet-4-20250514"),
}


def get_generator(console: Console | None = None) -> GenerationProvider | None:
    """Create the remote generation provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Provider instance, or None if not configured (local intents still work)

    Environment variables:
        LLM_PROVIDER: gemini, openai, deepseek or anthropic (default: gemini)
        GEMINI_API_KEY / GEMINI_MODEL (default: gemini-2.0-flash)
        OPENAI_API_KEY / OPENAI_CHAT_MODEL (default: gpt-4o-mini)
        DEEPSEEK_API_KEY / DEEPSEEK_MODEL (default: deepseek-chat)
        ANTHROPIC_API_KEY / ANTHROPIC_MODEL (default: claude-sonnet-4-20250514)
    """
    con = console or _console
    provider = os.getenv("LLM_PROVIDER", "gemini").lower()
    if provider == "claude":
        provider = "anthropic"

    if provider not in _PROVIDER_ENV:
        con.print(f"[red]Error: Unknown LLM provider: {escape(provider)}[/red]")
        return None

    key_var, model_var, default_model = _PROVIDER_ENV[provider]
    api_key = os.getenv(key_var)
    if not api_key:
        con.print(f"[yellow]Warning: {key_var} not set, remote answers disabled[/yellow]")
        return None

    model = os.getenv(model_var, default_model)
    return create_generation_provider(provider, api_key=api_key, model=model)


def get_recognizer() -> SpeechRecognizer:
    """Create the local speech recognizer.

    Environment variables:
        NOVA_WHISPER_MODEL: faster-whisper model (default: base.en)
    """
    return WhisperRecognizer(model_size=os.getenv("NOVA_WHISPER_MODEL", "base.en"))


def get_synthesizer(console: Console | None = None) -> SpeechSynthesizer:
    """Create the speech synthesizer, or a silent one if Piper is not set up.

    Environment variables:
        PIPER_PATH: Piper executable (default: piper)
        PIPER_VOICE: Path to the .onnx voice model
    """
    con = console or _console
    voice = os.getenv("PIPER_VOICE")
    if not voice:
        return SilentSynthesizer()

    synthesizer = PiperSynthesizer(voice_path=voice, piper_path=os.getenv("PIPER_PATH", "piper"))
    if not synthesizer.is_available():
        con.print("[yellow]Warning: Piper or its voice model not found, spoken replies disabled[/yellow]")
        return SilentSynthesizer()
    return synthesizer


def console_debug_callback(
    console: Console | None = None,
    log_level: str = "warning",
) -> Callable[[str, str, str], None]:
    """Build a debug callback that prints to a Rich console.

    Args:
        console: Console to print to (stderr by default)
        log_level: Minimum level to show (debug/info/warning/error)

    Returns:
        Callable(level, component, message) suitable for set_debug_callback
    """
    con = console or _console
    threshold = LogLevel.from_string(log_level)
    colors = {
        LogLevel.DEBUG: "dim",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def _callback(level: str, component: str, message: str) -> None:
        numeric = LogLevel.from_string(level)
        if numeric < threshold:
            return
        color = colors.get(numeric, "white")
        con.print(f"[{color}]{LogLevel.name(numeric):<7}[/{color}] [bold]\\[{component}][/bold] {escape(message)}")

    return _callback
