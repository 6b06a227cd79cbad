"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from discipleship.domain.entities import Notification, NotificationType
from discipleship.infrastructure.models import NotificationModel
from discipleship.utils import ensure_naive_utc, ensure_utc, now_utc

from ._persistence import commit_or_raise


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects.

    Every query is scoped to the recipient so one user can never read or
    change another user's notifications.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: str,
        *,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.filter(NotificationModel.read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, user_id: str) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read.is_(False))
            .count()
        )

    def get(self, notification_id: int, *, user_id: str) -> Notification | None:
        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            pairing_id=notification.pairing_id,
            type=notification.type.value,
            title=notification.title,
            message=notification.message,
            read=notification.read,
            created_at=ensure_naive_utc(notification.created_at or now_utc()),
        )
        self.session.add(model)
        commit_or_raise(self.session, "store notification")
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_ids: Iterable[int], *, user_id: str) -> int:
        ids = [notification_id for notification_id in notification_ids if notification_id is not None]
        if not ids:
            return 0
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id.in_(ids),
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        commit_or_raise(self.session, "mark notifications as read")
        return updated

    def mark_all_as_read(self, user_id: str) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read.is_(False))
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        commit_or_raise(self.session, "mark notifications as read")
        return updated

    def delete(self, notification_id: int, *, user_id: str) -> bool:
        deleted = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        commit_or_raise(self.session, "delete notification")
        return deleted == 1

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            pairing_id=model.pairing_id,
            type=NotificationType(model.type),
            title=model.title,
            message=model.message,
            read=bool(model.read),
            created_at=ensure_utc(model.created_at),
        )


__all__ = ["NotificationRepository"]
