"""Data models for the conversation transcript."""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class MessageRole(str, Enum):
    """Author of a transcript message."""

    USER = "user"
    COACH = "coach"
    SYSTEM = "system"    # Level-up announcements


class ConversationState(str, Enum):
    """Outbound request state of the conversation."""

    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"
    ERRORED = "errored"


class Message(BaseModel):
    """A transcript message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique message id")
    role: MessageRole = Field(description="Message author")
    content: str = Field(description="Message body")
