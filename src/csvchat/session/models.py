"""Data models for the chat session.

These models are independent of how the conversation is displayed or
where answers come from.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """One turn in the conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Author of the message")
    content: str = Field(description="Plain text for users, a document for the assistant")
    timestamp: int = Field(
        ge=0,
        description="Milliseconds since the epoch; unique within a session"
    )
