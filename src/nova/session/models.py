"""Data models for the conversation session.

Messages are immutable once appended; the session owns the only log.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class SessionState(str, Enum):
    """States of the per-session turn state machine."""

    IDLE = "idle"
    AWAITING_LOCAL_RESPONSE = "awaiting_local_response"
    AWAITING_REMOTE_RESPONSE = "awaiting_remote_response"


class Message(BaseModel):
    """A single entry of the conversation log."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who wrote the message")
    text: str = Field(description="Message text as submitted or generated")
    timestamp: datetime = Field(default_factory=datetime.now)


class SessionConfig(BaseModel):
    """Tunables for a conversation session.

    Delays simulate latency before canned replies; set them to 0 in tests.
    """

    model_config = ConfigDict(frozen=True)

    assistant_name: str = Field(default="Nova")
    identity_response: str = Field(default="my name is nova")
    provenance_response: str = Field(
        default="I was developed by Kartik, Rahul, Manjunath and Prathyaksha."
    )
    identity_delay: float = Field(default=1.0, ge=0.0, description="Seconds before the identity reply")
    provenance_delay: float = Field(default=0.5, ge=0.0, description="Seconds before the provenance reply")
