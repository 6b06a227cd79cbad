"""Use case for posting a message to a pairing."""

from __future__ import annotations

from sqlalchemy.orm import Session

from discipleship.domain.entities import Message
from discipleship.domain.events import NewMessage
from discipleship.domain.exceptions import ValidationError
from discipleship.infrastructure.repositories import MessageRepository
from discipleship.utils import now_utc

from ..access import require_active, require_participant, require_profile
from ..notifications.events import broadcast, emit

MAX_MESSAGE_LENGTH = 5000


def send_message(
    session: Session, pairing_id: int, *, sender_id: str, content: str
) -> Message:
    """Append a message and notify the other participant."""

    text = (content or "").strip()
    if not text:
        raise ValidationError("Message cannot be empty")
    if len(text) > MAX_MESSAGE_LENGTH:
        raise ValidationError(f"Message must be at most {MAX_MESSAGE_LENGTH} characters")

    pairing = require_participant(session, pairing_id, sender_id)
    require_active(pairing)
    sender = require_profile(session, sender_id)

    message = MessageRepository(session).create(
        Message(
            id=None,
            pairing_id=pairing_id,
            sender_id=sender_id,
            content=text,
            is_read=False,
            created_at=now_utc(),
        )
    )

    recipient_id = pairing.partner_id(sender_id)
    if recipient_id:
        emit(
            session,
            NewMessage(
                recipient_id=recipient_id,
                sender_name=sender.display_name,
                pairing_id=pairing_id,
                content=text,
            ),
        )
    broadcast(
        pairing.participant_ids,
        "message.created",
        {
            "id": message.id,
            "pairing_id": pairing_id,
            "sender_id": sender_id,
            "content": message.content,
            "created_at": message.created_at.isoformat() if message.created_at else None,
        },
    )
    return message


__all__ = ["MAX_MESSAGE_LENGTH", "send_message"]
