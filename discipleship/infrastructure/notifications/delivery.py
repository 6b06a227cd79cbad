"""Contract for channels that forward notifications outside the request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from discipleship.domain.entities import Notification, NotificationType, Profile


@dataclass(frozen=True)
class PushRequest:
    """What a delivery channel needs to alert ``recipient_id``.

    ``recipient`` is the loaded profile when available so channels can honour
    contact details and preferences without another query.
    """

    recipient_id: str
    title: str
    body: str
    target_url: str
    dedupe_tag: str
    notification_type: NotificationType
    recipient: Profile | None = None

    @classmethod
    def from_notification(
        cls, notification: Notification, recipient: Profile | None = None
    ) -> "PushRequest":
        return cls(
            recipient_id=notification.user_id,
            title=notification.title,
            body=notification.message,
            target_url=notification.target_url,
            dedupe_tag=notification.dedupe_tag,
            notification_type=notification.type,
            recipient=recipient,
        )


class PushDelivery(Protocol):
    """Best-effort delivery channel; implementations may raise freely."""

    def deliver(self, request: PushRequest, notification: Notification) -> None:
        ...


__all__ = ["PushDelivery", "PushRequest"]
