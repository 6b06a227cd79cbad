"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Closed set of notification categories understood by the clients."""

    MESSAGE = "message"
    ASSIGNMENT = "assignment"
    WEEK_COMPLETE = "week_complete"
    ENCOURAGEMENT = "encouragement"
    COVENANT = "covenant"
    PAIRING = "pairing"


DEFAULT_NOTIFICATION_ROUTE = "/dashboard"

NOTIFICATION_ROUTES: dict[NotificationType, str] = {
    NotificationType.MESSAGE: "/dashboard/messages/{pairing_id}",
    NotificationType.ASSIGNMENT: "/dashboard/progress",
    NotificationType.WEEK_COMPLETE: "/dashboard",
    NotificationType.ENCOURAGEMENT: "/dashboard",
    NotificationType.COVENANT: "/dashboard/covenant",
    NotificationType.PAIRING: "/dashboard",
}


def notification_target_url(
    notification_type: NotificationType, pairing_id: int | None = None
) -> str:
    """Return the client route a notification of ``notification_type`` opens."""

    template = NOTIFICATION_ROUTES.get(notification_type, DEFAULT_NOTIFICATION_ROUTE)
    if "{pairing_id}" in template:
        if pairing_id is None:
            return DEFAULT_NOTIFICATION_ROUTE
        return template.format(pairing_id=pairing_id)
    return template


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: str
    pairing_id: int | None
    type: NotificationType
    title: str
    message: str
    read: bool = False
    created_at: datetime | None = None

    @property
    def target_url(self) -> str:
        return notification_target_url(self.type, self.pairing_id)

    @property
    def dedupe_tag(self) -> str:
        return f"notif-{self.id}"


__all__ = [
    "DEFAULT_NOTIFICATION_ROUTE",
    "NOTIFICATION_ROUTES",
    "Notification",
    "NotificationType",
    "notification_target_url",
]
