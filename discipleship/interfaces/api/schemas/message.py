"""Message schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageRead(BaseModel):
    id: int
    pairing_id: int
    sender_id: str
    content: str
    is_read: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class MessageCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class MessagesReadResponse(BaseModel):
    updated: int


__all__ = ["MessageCreate", "MessageRead", "MessagesReadResponse"]
