"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

from typing import Any

from discipleship.domain.entities import Notification

from .delivery import PushRequest
from .manager import NotificationConnectionManager, notification_manager
from .realtime import schedule_send


class NotificationPublisher:
    """Serialize notifications and schedule their delivery over websockets."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its user."""

        message = {"type": "notification", "data": self._serialize(notification)}
        schedule_send(self._manager, notification.user_id, message)

    def deliver(self, request: PushRequest, notification: Notification) -> None:
        self.dispatch(notification)

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "user_id": notification.user_id,
            "pairing_id": notification.pairing_id,
            "type": notification.type.value,
            "title": notification.title,
            "message": notification.message,
            "read": notification.read,
            "url": notification.target_url,
            "tag": notification.dedupe_tag,
            "created_at": notification.created_at.isoformat()
            if notification.created_at
            else None,
        }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notification(notification: Notification) -> None:
    """Public helper that delegates to the shared publisher instance."""

    notification_publisher.dispatch(notification)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return NotificationPublisher._serialize(notification)


__all__ = [
    "NotificationPublisher",
    "dispatch_notification",
    "notification_publisher",
    "serialize_notification",
]
