"""Public helpers for emitting and managing notifications."""

from .encouragement import send_encouragement
from .events import broadcast, emit
from .manage import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    mark_notifications_read,
)

__all__ = [
    "broadcast",
    "count_unread_notifications",
    "delete_notification",
    "emit",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "mark_notifications_read",
    "send_encouragement",
]
