"""Error taxonomy for the conversation engine.

Every failure the engine can observe maps onto one of these classes.
None of them is fatal: the session always returns to idle with a
consistent message log.
"""


class NovaError(Exception):
    """Base class for all Nova errors."""


class EmptyInput(NovaError):
    """Raised when a blank utterance is validated eagerly."""


class RemoteGenerationError(NovaError):
    """The remote generation call failed (network, auth, quota or empty reply)."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.provider = provider


class CapabilityUnavailable(NovaError):
    """A speech capability is not available on this host."""

    def __init__(self, capability: str, reason: str | None = None):
        detail = f": {reason}" if reason else ""
        super().__init__(f"{capability} is not available{detail}")
        self.capability = capability
        self.reason = reason


class TimezoneResolutionFailure(NovaError):
    """A zone identifier could not be loaded.

    Only used internally by the date/time resolver, which recovers by
    falling back to the system default zone.
    """

    def __init__(self, zone: str):
        super().__init__(f"Unknown time zone: {zone!r}")
        self.zone = zone


def ensure_utterance(text: str | None) -> str:
    """Return the utterance unchanged, or raise EmptyInput if it is blank."""
    if text is None or not text.strip():
        raise EmptyInput("Utterance is empty")
    return text
