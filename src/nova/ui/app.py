"""Main Textual TUI application.

Presentation only: mirrors the session's message log and flags, and
forwards keystrokes and button presses into submit / start_listening /
stop_listening.
"""

import asyncio
import threading
from collections.abc import Callable
from typing import Any

from textual.app import App, ComposeResult
from textual.css.query import NoMatches
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..errors import CapabilityUnavailable
from ..session import ConversationSession
from .config import BUSY_NOTICE_TIMEOUT, LogLevel
from .screens import NoticeScreen
from .styles import APP_CSS
from .themes import NOVA_DUSK
from .widgets import ChatInputBar, DebugPanel, MessageLog, TypingIndicator


class NovaApp(App):
    """Textual chat UI for a ConversationSession."""

    CSS = APP_CSS
    TITLE = "Nova"
    SUB_TITLE = "Chat with your local assistant"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "toggle_listening", "Mic"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(self, session: ConversationSession, log_level: str | None = None) -> None:
        super().__init__()
        self._session = session
        self._log_level = log_level
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def session(self) -> ConversationSession:
        return self._session

    def compose(self) -> ComposeResult:
        name = self._session.config.assistant_name
        yield Header()
        yield MessageLog(name, id="message-log")
        yield TypingIndicator(name, id="typing-indicator")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(NOVA_DUSK)
        self.theme = "nova-dusk"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.display = True

        self._session.set_debug_callback(self._debug_sink)
        self._unsubscribe = self._session.subscribe(self._on_session_change)
        self._on_session_change(self._session)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        self._session.set_debug_callback(None)
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._session.close()

    def _call_thread_safe(self, func: Any, *args: Any) -> None:
        """Run a UI update on the app thread (synthesizers report from workers)."""
        if self._thread_id != threading.get_ident():
            self.call_from_thread(func, *args)
        else:
            func(*args)

    def _debug_sink(self, level: str, component: str, message: str) -> None:
        # Late reports from worker threads can arrive after shutdown
        if not self.is_running:
            return
        self._call_thread_safe(self._write_log_entry, component, message, LogLevel.from_string(level))

    def _write_log_entry(self, component: str, message: str, level: int) -> None:
        try:
            log_panel = self.query_one("#debug-panel", DebugPanel)
        except NoMatches:
            return
        log_panel.log_entry(component, message, level)

    def _on_session_change(self, session: ConversationSession) -> None:
        self.query_one("#message-log", MessageLog).sync(session.messages)
        self.query_one("#typing-indicator", TypingIndicator).set_visible(session.awaiting_response)
        self.query_one("#chat-input-bar", ChatInputBar).set_listening(session.listening)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        if not event.value.strip():
            return
        accepted = self._session.submit(event.value)
        if not accepted and self._session.awaiting_response:
            name = self._session.config.assistant_name
            self.notify(f"{name} is still replying", severity="warning", timeout=BUSY_NOTICE_TIMEOUT)

    def on_chat_input_bar_mic_toggled(self, event: ChatInputBar.MicToggled) -> None:
        self.action_toggle_listening()

    def action_toggle_listening(self) -> None:
        """Start or stop speech input."""
        if self._session.listening:
            self._session.stop_listening()
            return
        try:
            self._session.start_listening()
        except CapabilityUnavailable as e:
            self.push_screen(NoticeScreen("Speech input unavailable", str(e)))

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self.query_one("#debug-panel", DebugPanel).toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(session: ConversationSession, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        session: Session to drive (closed when the app exits)
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = NovaApp(session=session, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        session.close()
