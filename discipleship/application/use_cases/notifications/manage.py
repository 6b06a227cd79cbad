"""Use cases for reading and tidying a user's notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from discipleship.domain.entities import Notification
from discipleship.domain.exceptions import NotFoundError
from discipleship.infrastructure.repositories import NotificationRepository

DEFAULT_NOTIFICATION_LIMIT = 50


def list_notifications(
    session: Session,
    user_id: str,
    *,
    unread_only: bool = False,
    limit: int | None = DEFAULT_NOTIFICATION_LIMIT,
) -> Sequence[Notification]:
    """Return the newest notifications for ``user_id``."""

    return NotificationRepository(session).list_for_user(
        user_id, unread_only=unread_only, limit=limit
    )


def count_unread_notifications(session: Session, user_id: str) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(
    session: Session, notification_id: int, *, user_id: str
) -> Notification:
    repository = NotificationRepository(session)
    if repository.get(notification_id, user_id=user_id) is None:
        raise NotFoundError("Notification not found")
    repository.mark_as_read([notification_id], user_id=user_id)
    notification = repository.get(notification_id, user_id=user_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    return notification


def mark_notifications_read(
    session: Session, notification_ids: Sequence[int], *, user_id: str
) -> int:
    """Mark the given notifications read; ids of other users are ignored."""

    return NotificationRepository(session).mark_as_read(
        notification_ids, user_id=user_id
    )


def mark_all_notifications_read(session: Session, user_id: str) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


def delete_notification(session: Session, notification_id: int, *, user_id: str) -> None:
    if not NotificationRepository(session).delete(notification_id, user_id=user_id):
        raise NotFoundError("Notification not found")


__all__ = [
    "DEFAULT_NOTIFICATION_LIMIT",
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "mark_notifications_read",
]
