"""Conversation session module.

The session is the single entry point for the presentation layer:
submit utterances, start/stop listening, observe the log and flags.
"""

from .models import Message, Role, SessionConfig, SessionState
from .session import ConversationSession

__all__ = [
    "ConversationSession",
    "Message",
    "Role",
    "SessionConfig",
    "SessionState",
]
