"""Tests for notification drafts produced by domain events."""

from discipleship.domain.entities import NotificationType, notification_target_url
from discipleship.domain.events import (
    CovenantComplete,
    CovenantSigned,
    NewMessage,
    WeekUnlocked,
    preview,
)


def test_preview_truncates_long_content():
    text = "x" * 150
    assert preview(text) == "x" * 100 + "..."
    assert preview("short") == "short"


def test_new_message_draft_uses_sender_name_and_preview():
    (draft,) = NewMessage(
        recipient_id="learner", sender_name="Grace", pairing_id=4, content="y" * 120
    ).drafts()
    assert draft.user_id == "learner"
    assert draft.type is NotificationType.MESSAGE
    assert draft.title == "New message from Grace"
    assert draft.message.endswith("...")


def test_week_unlocked_reaches_both_participants():
    drafts = WeekUnlocked(
        leader_id="leader",
        learner_id="learner",
        pairing_id=1,
        week_number=2,
        week_title="Prayer & Communion",
    ).drafts()
    assert {draft.user_id for draft in drafts} == {"leader", "learner"}
    assert all("Prayer & Communion" in draft.message for draft in drafts)
    assert all(draft.title == "Week 2 Unlocked!" for draft in drafts)


def test_covenant_complete_names_the_other_party():
    drafts = CovenantComplete(
        leader_id="leader",
        leader_name="Grace",
        learner_id="learner",
        learner_name="Sam",
        pairing_id=1,
    ).drafts()
    by_user = {draft.user_id: draft for draft in drafts}
    assert "Sam" in by_user["leader"].message
    assert "Grace" in by_user["learner"].message


def test_covenant_signed_goes_to_partner_only():
    drafts = CovenantSigned(partner_id="learner", signer_name="Grace", pairing_id=1).drafts()
    assert [draft.user_id for draft in drafts] == ["learner"]
    assert drafts[0].type is NotificationType.COVENANT


def test_target_urls_follow_the_routing_table():
    assert notification_target_url(NotificationType.MESSAGE, 7) == "/dashboard/messages/7"
    assert notification_target_url(NotificationType.MESSAGE, None) == "/dashboard"
    assert notification_target_url(NotificationType.COVENANT, 7) == "/dashboard/covenant"
    assert notification_target_url(NotificationType.ASSIGNMENT) == "/dashboard/progress"
