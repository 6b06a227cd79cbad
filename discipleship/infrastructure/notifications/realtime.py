"""Helpers to broadcast realtime change events to connected clients."""

from __future__ import annotations

import asyncio
import copy
from typing import Any, Iterable, Set

from anyio import from_thread

from .manager import NotificationConnectionManager, notification_manager


def schedule_send(
    manager: NotificationConnectionManager, user_id: str, message: dict[str, Any]
) -> None:
    """Queue ``message`` for ``user_id`` from sync or async code.

    Users without an open connection are skipped, so callers outside the
    event loop only pay for a dictionary lookup.
    """

    if not manager.is_online(user_id):
        return
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # Sync route handlers run in AnyIO worker threads.
        from_thread.run(manager.send_to_user, user_id, message)
    else:
        loop.create_task(manager.send_to_user(user_id, message))


class RealtimeEventPublisher:
    """Dispatch structured realtime events to websocket subscribers."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, user_id: str, *, event_type: str, payload: Any) -> None:
        """Schedule a realtime ``event_type`` event for ``user_id``."""

        if not user_id:
            return

        message = {"type": event_type, "data": copy.deepcopy(payload)}
        schedule_send(self._manager, user_id, message)

    def dispatch_many(
        self,
        user_ids: Iterable[str | None],
        *,
        event_type: str,
        payload: Any,
    ) -> None:
        """Broadcast an event to multiple ``user_ids``."""

        seen: Set[str] = set()
        for user_id in user_ids:
            if not user_id or user_id in seen:
                continue
            seen.add(user_id)
            self.dispatch(user_id, event_type=event_type, payload=payload)


realtime_event_publisher = RealtimeEventPublisher(notification_manager)


def dispatch_realtime_event(
    user_ids: Iterable[str | None], *, event_type: str, payload: Any
) -> None:
    """Public helper to broadcast realtime events to ``user_ids``."""

    realtime_event_publisher.dispatch_many(
        user_ids, event_type=event_type, payload=payload
    )


__all__ = [
    "RealtimeEventPublisher",
    "dispatch_realtime_event",
    "realtime_event_publisher",
    "schedule_send",
]
