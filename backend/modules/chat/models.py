"""
Chat module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


MAX_MESSAGE_LENGTH = 4000


class SendMessageRequest(BaseModel):
    """Request body for posting a chat message."""

    message: str = Field(..., max_length=MAX_MESSAGE_LENGTH, description="Message text")

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Message cannot be empty")
        return v


class ChatMessage(BaseModel):
    """One message on a request's chat. Messages are never edited."""

    id: str = Field(..., description="Message ID (UUID)")
    request_id: str = Field(..., description="Request the chat belongs to")
    sender_id: str = Field(..., description="Author")
    message: str = Field(..., description="Message text")
    created_at: datetime = Field(..., description="Commit time")
    sender_name: Optional[str] = Field(None, description="Author display name")
