"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from discipleship.domain.entities import NotificationType


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[int] = Field(..., min_length=1, description="Notification identifiers")

    def unique_ids(self) -> list[int]:
        """Return the identifiers without duplicates, preserving order."""

        return list(dict.fromkeys(self.ids))


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: str
    pairing_id: int | None
    type: NotificationType
    title: str
    message: str
    read: bool
    url: str
    created_at: datetime | None


class UnreadCountRead(BaseModel):
    unread: int


class MarkReadResponse(BaseModel):
    updated: int


__all__ = [
    "MarkReadResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "UnreadCountRead",
]
