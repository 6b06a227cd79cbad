"""Persist notifications for domain events and forward them for delivery."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from discipleship.domain.entities import Notification, Profile
from discipleship.domain.events import DomainEvent, NotificationDraft
from discipleship.domain.exceptions import PersistenceError
from discipleship.infrastructure.notifications import (
    PushRequest,
    dispatch_realtime_event,
    get_deliveries,
)
from discipleship.infrastructure.repositories import (
    NotificationRepository,
    ProfileRepository,
)
from discipleship.utils import now_utc

logger = logging.getLogger(__name__)


def _persist_notification(
    session: Session, draft: NotificationDraft
) -> Notification | None:
    notification = Notification(
        id=None,
        user_id=draft.user_id,
        pairing_id=draft.pairing_id,
        type=draft.type,
        title=draft.title,
        message=draft.message,
        read=False,
        created_at=now_utc(),
    )
    try:
        return NotificationRepository(session).create(notification)
    except PersistenceError:
        logger.warning(
            "Dropping %s notification for user %s", draft.type.value, draft.user_id
        )
        return None


def _load_recipients(session: Session, user_ids: list[str]) -> dict[str, Profile]:
    try:
        return ProfileRepository(session).get_map_by_ids(user_ids)
    except SQLAlchemyError:
        session.rollback()
        logger.warning("Could not load notification recipients %s", user_ids)
        return {}


def _forward(notification: Notification, recipient: Profile | None) -> None:
    request = PushRequest.from_notification(notification, recipient)
    for delivery in get_deliveries():
        try:
            delivery.deliver(request, notification)
        except Exception:
            logger.exception(
                "Delivery %s failed for %s",
                type(delivery).__name__,
                request.dedupe_tag,
            )


def emit(session: Session, event: DomainEvent) -> list[Notification]:
    """Store one notification per recipient of ``event`` and forward each.

    Call this after the triggering change is committed. Nothing raised while
    storing or delivering reaches the caller.
    """

    drafts = event.drafts()
    if not drafts:
        return []
    recipients = _load_recipients(session, [draft.user_id for draft in drafts])

    saved: list[Notification] = []
    for draft in drafts:
        notification = _persist_notification(session, draft)
        if notification is None:
            continue
        saved.append(notification)
        _forward(notification, recipients.get(notification.user_id))
    return saved


def broadcast(user_ids: Iterable[str | None], event_type: str, payload: Any) -> None:
    """Best-effort realtime change event for ``user_ids``."""

    try:
        dispatch_realtime_event(user_ids, event_type=event_type, payload=payload)
    except Exception:
        logger.exception("Could not broadcast %s event", event_type)


__all__ = ["broadcast", "emit"]
