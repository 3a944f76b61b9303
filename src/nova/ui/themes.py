"""Theme definitions for the TUI.

To add a new theme, define it here and register it in the app.
"""

from textual.theme import Theme

# Violet/indigo palette matching Nova's gradient header
NOVA_DUSK = Theme(
    name="nova-dusk",
    primary="#a78bfa",      # Violet - assistant accents, header
    secondary="#60a5fa",    # Sky blue - user bubbles
    accent="#f472b6",       # Pink - mic while listening
    foreground="#e5e7eb",
    background="#0f0b1e",
    success="#34d399",      # Send button
    warning="#fbbf24",
    error="#f87171",
    surface="#1c1733",
    panel="#161229",
    dark=True,
    variables={
        "block-cursor-foreground": "#0f0b1e",
        "block-cursor-background": "#e9d5ff",
        "input-cursor-background": "#e5e7eb",
        "input-cursor-foreground": "#0f0b1e",
        "input-selection-background": "#a78bfa 30%",
        "footer-key-foreground": "#a78bfa",
    },
)
