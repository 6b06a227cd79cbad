"""Registry of the channels every emitted notification is forwarded to."""

from __future__ import annotations

from typing import List

from .delivery import PushDelivery

_deliveries: List[PushDelivery] = []


def register_delivery(delivery: PushDelivery) -> None:
    if delivery not in _deliveries:
        _deliveries.append(delivery)


def unregister_delivery(delivery: PushDelivery) -> None:
    if delivery in _deliveries:
        _deliveries.remove(delivery)


def get_deliveries() -> list[PushDelivery]:
    return list(_deliveries)


def clear_deliveries() -> None:
    _deliveries.clear()


def configure_default_deliveries() -> None:
    """Register the websocket channel and, when configured, email."""

    from discipleship.config import get_settings

    from .email_delivery import EmailPushDelivery
    from .publisher import notification_publisher

    register_delivery(notification_publisher)
    if get_settings().email_enabled and not any(
        isinstance(delivery, EmailPushDelivery) for delivery in _deliveries
    ):
        register_delivery(EmailPushDelivery())


__all__ = [
    "clear_deliveries",
    "configure_default_deliveries",
    "get_deliveries",
    "register_delivery",
    "unregister_delivery",
]
