"""
Nova: a conversational front-end with deterministic local intents.

Utterances (typed or spoken) are routed through a small ordered rule
table; anything the rules cannot answer is forwarded to a remote
text-generation provider.
"""

__version__ = "0.1.0"

from .errors import (
    CapabilityUnavailable,
    EmptyInput,
    NovaError,
    RemoteGenerationError,
    TimezoneResolutionFailure,
)
from .intent import IntentClassifier, IntentKind, IntentMatch, TimezoneResolver
from .llm import GenerationProvider, create_generation_provider
from .session import ConversationSession, Message, Role, SessionConfig, SessionState

__all__ = [
    "CapabilityUnavailable",
    "ConversationSession",
    "EmptyInput",
    "GenerationProvider",
    "IntentClassifier",
    "IntentKind",
    "IntentMatch",
    "Message",
    "NovaError",
    "RemoteGenerationError",
    "Role",
    "SessionConfig",
    "SessionState",
    "TimezoneResolutionFailure",
    "TimezoneResolver",
    "create_generation_provider",
]
