"""Tests for pairing messages."""

from __future__ import annotations

import pytest

from discipleship.application.use_cases.messages import (
    count_unread_messages,
    list_messages,
    mark_messages_read,
    send_message,
)
from discipleship.domain.entities import NotificationType
from discipleship.domain.exceptions import PermissionDeniedError, ValidationError
from discipleship.infrastructure.repositories import NotificationRepository


def test_send_message_notifies_the_other_participant(
    db_session, active_pairing, leader, learner, recorder
):
    message = send_message(
        db_session, active_pairing.id, sender_id=learner.id, content="  Hello there  "
    )

    assert message.content == "Hello there"
    assert not message.is_read
    (notification,) = NotificationRepository(db_session).list_for_user(leader.id)
    assert notification.type is NotificationType.MESSAGE
    assert notification.title == "New message from Sam Learner"
    assert notification.target_url == f"/dashboard/messages/{active_pairing.id}"
    assert NotificationRepository(db_session).list_for_user(learner.id) == []


@pytest.mark.parametrize("content", ["", "   ", "x" * 5001])
def test_send_message_validates_content(db_session, active_pairing, learner, content):
    with pytest.raises(ValidationError):
        send_message(db_session, active_pairing.id, sender_id=learner.id, content=content)


def test_send_message_requires_active_pairing(db_session, pending_pairing, leader):
    with pytest.raises(ValidationError):
        send_message(db_session, pending_pairing.id, sender_id=leader.id, content="Hi")


def test_outsiders_cannot_read_the_conversation(db_session, active_pairing, make_profile):
    outsider = make_profile("outsider")
    with pytest.raises(PermissionDeniedError):
        list_messages(db_session, active_pairing.id, viewer_id=outsider.id)


def test_list_messages_orders_oldest_first_and_limits_to_newest(
    db_session, active_pairing, leader, learner
):
    for index in range(5):
        sender = leader if index % 2 == 0 else learner
        send_message(db_session, active_pairing.id, sender_id=sender.id, content=f"m{index}")

    everything = list_messages(db_session, active_pairing.id, viewer_id=leader.id)
    assert [m.content for m in everything] == ["m0", "m1", "m2", "m3", "m4"]

    latest = list_messages(db_session, active_pairing.id, viewer_id=leader.id, limit=2)
    assert [m.content for m in latest] == ["m3", "m4"]


def test_mark_read_is_monotonic_and_idempotent(db_session, active_pairing, leader, learner):
    send_message(db_session, active_pairing.id, sender_id=leader.id, content="one")
    send_message(db_session, active_pairing.id, sender_id=leader.id, content="two")
    send_message(db_session, active_pairing.id, sender_id=learner.id, content="reply")

    assert count_unread_messages(db_session, active_pairing.id, viewer_id=learner.id) == 2
    assert mark_messages_read(db_session, active_pairing.id, viewer_id=learner.id) == 2
    assert mark_messages_read(db_session, active_pairing.id, viewer_id=learner.id) == 0
    assert count_unread_messages(db_session, active_pairing.id, viewer_id=learner.id) == 0

    messages = list_messages(db_session, active_pairing.id, viewer_id=learner.id)
    read_flags = {m.content: m.is_read for m in messages}
    assert read_flags == {"one": True, "two": True, "reply": False}
