"""Use cases for pairing messages."""

from .read_messages import count_unread_messages, list_messages, mark_messages_read
from .send_message import MAX_MESSAGE_LENGTH, send_message

__all__ = [
    "MAX_MESSAGE_LENGTH",
    "count_unread_messages",
    "list_messages",
    "mark_messages_read",
    "send_message",
]
