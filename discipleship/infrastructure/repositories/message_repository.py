"""Persistence helpers for pairing messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from discipleship.domain.entities import Message
from discipleship.infrastructure.models import MessageModel
from discipleship.utils import ensure_naive_utc, ensure_utc, now_utc

from ._persistence import commit_or_raise


class MessageRepository:
    """Append and read the message log of a pairing."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message) -> Message:
        model = MessageModel(
            pairing_id=message.pairing_id,
            sender_id=message.sender_id,
            content=message.content,
            is_read=message.is_read,
            created_at=ensure_naive_utc(message.created_at or now_utc()),
        )
        self.session.add(model)
        commit_or_raise(self.session, "send message")
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_pairing(
        self, pairing_id: int, *, limit: int | None = None
    ) -> Sequence[Message]:
        """Return messages oldest first; ``limit`` keeps only the newest ones."""

        query = self.session.query(MessageModel).filter(
            MessageModel.pairing_id == pairing_id
        )
        if limit is None:
            query = query.order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
            return [self._to_entity(model) for model in query.all()]

        query = query.order_by(
            MessageModel.created_at.desc(), MessageModel.id.desc()
        ).limit(limit)
        return [self._to_entity(model) for model in reversed(query.all())]

    def mark_read(self, pairing_id: int, *, viewer_id: str) -> int:
        """Mark the partner's unread messages as read and return how many changed."""

        updated = (
            self.session.query(MessageModel)
            .filter(MessageModel.pairing_id == pairing_id)
            .filter(MessageModel.sender_id != viewer_id)
            .filter(MessageModel.is_read.is_(False))
            .update({MessageModel.is_read: True}, synchronize_session=False)
        )
        commit_or_raise(self.session, "mark messages as read")
        return updated

    def count_unread(self, pairing_id: int, *, viewer_id: str) -> int:
        return (
            self.session.query(MessageModel)
            .filter(MessageModel.pairing_id == pairing_id)
            .filter(MessageModel.sender_id != viewer_id)
            .filter(MessageModel.is_read.is_(False))
            .count()
        )

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            pairing_id=model.pairing_id,
            sender_id=model.sender_id,
            content=model.content,
            is_read=bool(model.is_read),
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["MessageRepository"]
