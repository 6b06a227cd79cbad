"""Notification delivery infrastructure."""

from .delivery import PushDelivery, PushRequest
from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    NotificationPublisher,
    dispatch_notification,
    notification_publisher,
    serialize_notification,
)
from .realtime import dispatch_realtime_event, realtime_event_publisher
from .registry import (
    clear_deliveries,
    configure_default_deliveries,
    get_deliveries,
    register_delivery,
    unregister_delivery,
)

__all__ = [
    "NotificationConnectionManager",
    "NotificationPublisher",
    "PushDelivery",
    "PushRequest",
    "clear_deliveries",
    "configure_default_deliveries",
    "dispatch_notification",
    "dispatch_realtime_event",
    "get_deliveries",
    "notification_manager",
    "notification_publisher",
    "realtime_event_publisher",
    "register_delivery",
    "serialize_notification",
    "unregister_delivery",
]
