"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message rendering and scrolling
- Typing indicator visibility
- Input bar with mic toggle
- Log rendering and level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, RichLog, Static

from ..session import Message, Role
from .config import (
    INPUT_PLACEHOLDER,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    TYPING_INDICATOR_TEMPLATE,
    LogLevel,
)


class MessageLog(VerticalScroll):
    """Scrollable conversation log.

    Renders session messages incrementally; the session remains the
    owner of the log, this widget only mirrors it.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "No messages yet"

    def __init__(self, assistant_name: str = "Nova", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._assistant_name = assistant_name
        self._rendered = 0

    @property
    def rendered_count(self) -> int:
        return self._rendered

    def sync(self, messages: tuple[Message, ...]) -> None:
        """Render any messages appended since the last sync."""
        new_messages = messages[self._rendered:]
        if not new_messages:
            return
        for message in new_messages:
            self._render_message(message)
        self._rendered = len(messages)
        self.border_subtitle = f"{self._rendered} messages"
        self.scroll_end(animate=False)

    def _render_message(self, message: Message) -> None:
        if message.role == Role.USER:
            author, css_class = "You", "user-message"
        else:
            author, css_class = self._assistant_name, "assistant-message"

        timestamp = message.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        container = Vertical(classes=f"chat-message {css_class}")
        container.compose_add_child(Static(f"{author} [{timestamp}]", classes="message-header", markup=False))
        container.compose_add_child(Static(message.text, markup=False))
        self.mount(container)


class TypingIndicator(Static):
    """'Nova is typing...' line shown while a response is pending."""

    def __init__(self, assistant_name: str = "Nova", *args, **kwargs) -> None:
        super().__init__(TYPING_INDICATOR_TEMPLATE.format(name=assistant_name), *args, **kwargs)

    def set_visible(self, visible: bool) -> None:
        self.set_class(visible, "-visible")


class ChatInputBar(Horizontal):
    """Single-line input with mic toggle and Send button."""

    class Submitted(TextualMessage):
        """Posted when the user submits text (Enter or Send)."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class MicToggled(TextualMessage):
        """Posted when the mic button is pressed."""

    def compose(self):
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Mic", id="mic-btn").with_tooltip("Start listening")
        yield Button("Send", id="send-btn", variant="success").with_tooltip("Send message")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._submit()
        elif event.button.id == "mic-btn":
            self.post_message(self.MicToggled())

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", Input)
        value = text_input.value
        text_input.value = ""
        self.post_message(self.Submitted(value))

    def set_listening(self, listening: bool) -> None:
        """Reflect the listening flag on the mic button."""
        mic = self.query_one("#mic-btn", Button)
        mic.set_class(listening, "-listening")
        mic.label = "Stop" if listening else "Mic"
        mic.tooltip = "Stop listening" if listening else "Start listening"

    def focus_input(self) -> None:
        self.query_one("#chat-input", Input).focus()


class DebugPanel(RichLog):
    """Log panel for session tracing with level filtering.

    Receives the session's debug callback output. Hidden by default,
    shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"

    def __init__(self, *args, log_level: int = LogLevel.INFO, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self.border_subtitle = f"Level: {LogLevel.name(level)}"

    def on_mount(self) -> None:
        self.display = False
        self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"

    def log_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."
        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        color = level_colors.get(level, "white")
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{color}]{LogLevel.name(level):<7}[/] "
            f"[bold]\\[{component}][/] {escape(message)}"
        )

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        self.display = not self.display
        return self.display
