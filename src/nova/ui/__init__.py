"""Terminal UI module for Nova.

Provides a Textual-based chat front-end for a ConversationSession.

Module structure (each module hides a design decision):
- config.py: UI constants and log levels
- widgets.py: Message log, typing indicator, input bar, log panel
- styles.py: CSS layout
- themes.py: Color palette
- screens.py: Blocking notices
- app.py: Wiring widgets to the session
"""

from .app import NovaApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatInputBar, DebugPanel, MessageLog, TypingIndicator

__all__ = [
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "MessageLog",
    "NovaApp",
    "TypingIndicator",
    "run_textual_tui",
]
