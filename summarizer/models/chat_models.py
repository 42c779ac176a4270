"""
Chat-related data models.

This module contains Pydantic models for the visible chat history.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    """Author of a chat message."""
    USER = "user"
    MODEL = "model"


class ChatState(str, Enum):
    """Lifecycle state of a chat session."""
    IDLE = "idle"
    SENDING = "sending"
    ERRORED = "errored"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChatMessage(BaseModel):
    """Single entry of the visible conversation."""
    role: ChatRole = Field(description="Either 'user' or 'model'")
    text: str = Field(description="Message text")
    timestamp: datetime = Field(default_factory=_utcnow, description="Creation time (UTC)")
    error: bool = Field(default=False, description="Whether this message reports a failed exchange")

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "role": self.role.value,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
            "error": self.error,
        }
