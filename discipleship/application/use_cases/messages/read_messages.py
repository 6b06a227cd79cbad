"""Use cases for reading the message log."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from discipleship.domain.entities import Message
from discipleship.domain.exceptions import ValidationError
from discipleship.infrastructure.repositories import MessageRepository

from ..access import require_participant
from ..notifications.events import broadcast


def list_messages(
    session: Session, pairing_id: int, *, viewer_id: str, limit: int | None = None
) -> Sequence[Message]:
    """Return the conversation oldest first, or only its newest ``limit`` messages."""

    if limit is not None and limit < 1:
        raise ValidationError("Limit must be positive")
    require_participant(session, pairing_id, viewer_id)
    return MessageRepository(session).list_for_pairing(pairing_id, limit=limit)


def mark_messages_read(session: Session, pairing_id: int, *, viewer_id: str) -> int:
    """Mark the partner's messages read; already read messages stay read."""

    pairing = require_participant(session, pairing_id, viewer_id)
    updated = MessageRepository(session).mark_read(pairing_id, viewer_id=viewer_id)
    if updated:
        broadcast(
            pairing.participant_ids,
            "messages.read",
            {"pairing_id": pairing_id, "reader_id": viewer_id},
        )
    return updated


def count_unread_messages(session: Session, pairing_id: int, *, viewer_id: str) -> int:
    require_participant(session, pairing_id, viewer_id)
    return MessageRepository(session).count_unread(pairing_id, viewer_id=viewer_id)


__all__ = ["count_unread_messages", "list_messages", "mark_messages_read"]
