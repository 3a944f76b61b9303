"""UI constants and the log level vocabulary shared by both log sinks."""


class LogLevel:
    """Numeric levels for the debug callback's level strings.

    The session and its collaborators report with the strings 'debug',
    'info', 'warning' and 'error'; the TUI panel and the CLI console
    filter on these numbers.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _by_name = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        """Level strings accepted on the command line."""
        return tuple(cls._by_name)

    @classmethod
    def name(cls, level: int) -> str:
        for key, value in cls._by_name.items():
            if value == level:
                return key.upper()
        return "UNKNOWN"

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Map a level string to its number; unrecognised strings map to INFO."""
        return cls._by_name.get(level_str.strip().lower(), cls.INFO)


# Chat display
TYPING_INDICATOR_TEMPLATE = "{name} is typing..."
INPUT_PLACEHOLDER = "Write your message here..."
MESSAGE_TIMESTAMP_FORMAT = "%H:%M"

# Log panel
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating

# Seconds the "still replying" toast stays visible
BUSY_NOTICE_TIMEOUT = 2
