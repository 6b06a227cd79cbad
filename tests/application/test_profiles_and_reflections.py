"""Tests for onboarding, profile edits and reflections."""

from __future__ import annotations

import pytest

from discipleship.application.use_cases.profiles import (
    complete_onboarding,
    ensure_profile,
    get_profile,
    update_profile,
)
from discipleship.application.use_cases.reflections import (
    create_reflection,
    list_reflections,
)
from discipleship.domain.entities import PairingStatus, UserRole
from discipleship.domain.exceptions import (
    NotFoundError,
    ValidationError,
    WeekLockedError,
)


def test_ensure_profile_creates_once(db_session):
    created = ensure_profile(db_session, "new-user", email="new@example.com")
    again = ensure_profile(db_session, "new-user")

    assert created.id == again.id == "new-user"
    assert again.email == "new@example.com"
    assert again.role is None and not again.onboarding_complete


def test_get_profile_missing(db_session):
    with pytest.raises(NotFoundError):
        get_profile(db_session, "ghost")


def test_leader_onboarding_opens_a_pairing(db_session):
    ensure_profile(db_session, "fresh-leader")
    profile, pairing = complete_onboarding(
        db_session, "fresh-leader", full_name=" Grace ", role="leader"
    )

    assert profile.role is UserRole.LEADER
    assert profile.full_name == "Grace"
    assert profile.onboarding_complete
    assert pairing is not None and pairing.status is PairingStatus.PENDING

    _, same_pairing = complete_onboarding(
        db_session, "fresh-leader", full_name="Grace", role=UserRole.LEADER
    )
    assert same_pairing.id == pairing.id


def test_learner_onboarding_has_no_pairing(db_session):
    ensure_profile(db_session, "fresh-learner")
    profile, pairing = complete_onboarding(
        db_session, "fresh-learner", full_name="Sam", role="learner"
    )
    assert profile.is_learner()
    assert pairing is None


def test_role_cannot_change_after_onboarding(db_session, learner):
    with pytest.raises(ValidationError):
        complete_onboarding(db_session, learner.id, full_name="Sam", role="leader")
    with pytest.raises(ValidationError):
        complete_onboarding(db_session, learner.id, full_name="Sam", role="admin")


def test_update_profile_keeps_omitted_fields(db_session, learner):
    updated = update_profile(db_session, learner.id, bio="Hello", phone=" 555 ")
    assert updated.full_name == learner.full_name
    assert updated.bio == "Hello"
    assert updated.phone == "555"
    with pytest.raises(ValidationError):
        update_profile(db_session, learner.id, full_name="   ")


def test_reflections_show_shared_and_own(db_session, active_pairing, leader, learner):
    create_reflection(
        db_session, active_pairing.id, user_id=learner.id, week_number=1,
        text="Private thought", is_shared=False,
    )
    create_reflection(
        db_session, active_pairing.id, user_id=learner.id, week_number=1,
        text="Shared thought", is_shared=True,
    )
    create_reflection(
        db_session, active_pairing.id, user_id=leader.id, week_number=1,
        text="Leader note", is_shared=False,
    )

    leader_view = list_reflections(
        db_session, active_pairing.id, viewer_id=leader.id, week_number=1
    )
    learner_view = list_reflections(
        db_session, active_pairing.id, viewer_id=learner.id, week_number=1
    )
    assert {r.reflection_text for r in leader_view} == {"Shared thought", "Leader note"}
    assert {r.reflection_text for r in learner_view} == {"Private thought", "Shared thought"}


def test_reflections_respect_week_lock(db_session, active_pairing, learner):
    with pytest.raises(WeekLockedError):
        create_reflection(
            db_session, active_pairing.id, user_id=learner.id, week_number=2, text="Too soon"
        )
    with pytest.raises(ValidationError):
        create_reflection(
            db_session, active_pairing.id, user_id=learner.id, week_number=1, text="  "
        )
