"""Forward notifications by email to recipients who opted in."""

from __future__ import annotations

import logging

from discipleship.domain.entities import Notification, NotificationType, Profile
from discipleship.infrastructure.email import send_notification_email

from .delivery import PushRequest

logger = logging.getLogger(__name__)

_MESSAGE_TYPES = {NotificationType.MESSAGE}
_PROGRESS_TYPES = {NotificationType.ASSIGNMENT, NotificationType.WEEK_COMPLETE}


def wants_email(profile: Profile | None, notification_type: NotificationType) -> bool:
    """Return whether ``profile`` accepts emails for ``notification_type``."""

    if profile is None or not profile.email or not profile.email_notifications:
        return False
    if notification_type in _MESSAGE_TYPES:
        return profile.message_notifications
    if notification_type in _PROGRESS_TYPES:
        return profile.progress_notifications
    return True


class EmailPushDelivery:
    """Delivery channel backed by SendGrid."""

    def deliver(self, request: PushRequest, notification: Notification) -> None:
        recipient = request.recipient
        if recipient is None or not wants_email(recipient, request.notification_type):
            return
        sent = send_notification_email(
            recipient.email or "",
            title=request.title,
            body=request.body,
            target_url=request.target_url,
        )
        if not sent:
            logger.info(
                "Notification %s was not emailed to %s",
                request.dedupe_tag,
                request.recipient_id,
            )


__all__ = ["EmailPushDelivery", "wants_email"]
