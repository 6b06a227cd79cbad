"""Domain entity representing a chat message inside a pairing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Message:
    id: int | None
    pairing_id: int
    sender_id: str
    content: str
    is_read: bool = False
    created_at: datetime | None = None


__all__ = ["Message"]
