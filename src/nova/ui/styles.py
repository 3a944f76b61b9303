"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

#nova-banner {
    height: 3;
    content-align: center middle;
    text-style: bold;
    color: $foreground;
    background: $primary 40%;
}

#message-log {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}

.chat-message {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
}

.user-message {
    border-left: thick $secondary;
    background: $secondary 10%;
}

.assistant-message {
    border-left: thick $primary;
    background: $primary 10%;
}

.message-header {
    color: $text-muted;
    text-style: italic;
}

#typing-indicator {
    height: 1;
    padding: 0 2;
    color: $primary;
    text-style: italic;
    display: none;

    &.-visible {
        display: block;
    }
}

#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    padding: 0 1;
}

#chat-input-bar {
    height: 3;
    dock: bottom;
    margin-bottom: 1;
}

#chat-input {
    width: 1fr;
}

#mic-btn {
    min-width: 8;
    margin: 0 1;

    &.-listening {
        background: $accent;
        color: $background;
    }
}

#send-btn {
    min-width: 10;
}
"""
