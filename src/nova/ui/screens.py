"""Modal screens for the TUI.

Hides how blocking notices (e.g. speech input unavailable) are shown.
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class NoticeScreen(ModalScreen[None]):
    """Blocking notice that must be dismissed before chatting continues."""

    CSS = """
    NoticeScreen {
        align: center middle;
        background: $background 70%;
    }

    #notice-dialog {
        width: 60;
        height: auto;
        border: tall $warning;
        background: $surface;
        padding: 1 2;
    }

    #notice-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $warning;
        padding-bottom: 1;
    }

    #notice-body {
        width: 100%;
        text-align: center;
        padding: 0 1 1 1;
    }

    #notice-dialog Button {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss_notice", "Close", show=False),
        Binding("enter", "dismiss_notice", "Close", show=False),
    ]

    def __init__(self, title: str, body: str) -> None:
        super().__init__()
        self._title = title
        self._body = body

    def compose(self) -> ComposeResult:
        with Vertical(id="notice-dialog"):
            yield Static(self._title, id="notice-title")
            yield Static(self._body, id="notice-body")
            yield Button("OK", id="notice-ok", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "notice-ok":
            self.dismiss(None)

    def action_dismiss_notice(self) -> None:
        self.dismiss(None)
