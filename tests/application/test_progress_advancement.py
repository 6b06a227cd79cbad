"""Tests for recording completions and unlocking weeks."""

from __future__ import annotations

import pytest

import discipleship.application.use_cases.progress.record_completion as completion_module
from discipleship.application.use_cases.progress import (
    get_progress_overview,
    get_week_detail,
    record_assignment_completion,
    save_assignment_progress,
)
from discipleship.domain.entities import NotificationType, ProgressStatus
from discipleship.domain.exceptions import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    WeekLockedError,
)
from discipleship.infrastructure.models import PairingModel
from discipleship.infrastructure.repositories import (
    AssignmentProgressRepository,
    CurriculumRepository,
    NotificationRepository,
    PairingRepository,
)


def _week_ids(db_session, week_number: int) -> list[int]:
    return [a.id for a in CurriculumRepository(db_session).list_assignments(week_number)]


def _set_current_week(db_session, pairing_id: int, week: int) -> None:
    db_session.get(PairingModel, pairing_id).current_week = week
    db_session.commit()


def test_completing_the_whole_current_week_unlocks_the_next(
    db_session, active_pairing, leader, learner, recorder
):
    first, second, third = _week_ids(db_session, 1)

    record_assignment_completion(db_session, active_pairing.id, first, user_id=learner.id)
    update = record_assignment_completion(
        db_session, active_pairing.id, second, user_id=learner.id
    )
    assert not update.advanced
    assert PairingRepository(db_session).get(active_pairing.id).current_week == 1

    update = record_assignment_completion(
        db_session, active_pairing.id, third, user_id=learner.id
    )
    assert update.advanced
    assert update.current_week == 2
    assert PairingRepository(db_session).get(active_pairing.id).current_week == 2

    unlocked = [
        request
        for request in recorder.requests
        if request.title == "Week 2 Unlocked!"
    ]
    assert sorted(request.recipient_id for request in unlocked) == [leader.id, learner.id]
    week_two_title = CurriculumRepository(db_session).get_week(2).title
    assert all(week_two_title in request.body for request in unlocked)


def test_learner_completions_notify_the_leader(db_session, active_pairing, leader, learner):
    ids = _week_ids(db_session, 1)
    for assignment_id in ids:
        record_assignment_completion(
            db_session, active_pairing.id, assignment_id, user_id=learner.id
        )

    leader_types = [n.type for n in NotificationRepository(db_session).list_for_user(leader.id)]
    assert leader_types.count(NotificationType.ASSIGNMENT) == 3
    # One "week completed" plus the leader's copy of "week unlocked".
    assert leader_types.count(NotificationType.WEEK_COMPLETE) == 2


def test_recompleting_an_assignment_does_not_notify_again(
    db_session, active_pairing, leader, learner
):
    first = _week_ids(db_session, 1)[0]
    record_assignment_completion(db_session, active_pairing.id, first, user_id=learner.id)
    record_assignment_completion(db_session, active_pairing.id, first, user_id=learner.id)

    inbox = NotificationRepository(db_session).list_for_user(leader.id)
    assert len(inbox) == 1


def test_leader_rows_do_not_count_toward_week_completion(
    db_session, active_pairing, leader
):
    for assignment_id in _week_ids(db_session, 1):
        update = record_assignment_completion(
            db_session, active_pairing.id, assignment_id, user_id=leader.id
        )
        assert not update.advanced
    assert PairingRepository(db_session).get(active_pairing.id).current_week == 1


def test_completions_outside_current_week_never_advance(
    db_session, active_pairing, learner
):
    _set_current_week(db_session, active_pairing.id, 2)
    for assignment_id in _week_ids(db_session, 1) + _week_ids(db_session, 4):
        update = record_assignment_completion(
            db_session, active_pairing.id, assignment_id, user_id=learner.id
        )
        assert not update.advanced
    assert PairingRepository(db_session).get(active_pairing.id).current_week == 2


def test_final_week_completion_reports_journey_complete(
    db_session, active_pairing, learner
):
    _set_current_week(db_session, active_pairing.id, 6)
    for assignment_id in _week_ids(db_session, 6):
        update = record_assignment_completion(
            db_session, active_pairing.id, assignment_id, user_id=learner.id
        )
        assert not update.advanced

    pairing = PairingRepository(db_session).get(active_pairing.id)
    assert pairing.current_week == 6
    overview = get_progress_overview(db_session, active_pairing.id, profile_id=learner.id)
    assert overview.journey_complete
    assert overview.pairing.status is pairing.status


def test_stale_week_observation_cannot_double_advance(
    db_session, active_pairing, learner
):
    assert PairingRepository(db_session).advance_week(active_pairing.id, from_week=1)
    db_session.commit()
    assert not PairingRepository(db_session).advance_week(active_pairing.id, from_week=1)
    db_session.commit()
    assert PairingRepository(db_session).get(active_pairing.id).current_week == 2


def test_save_progress_in_progress_clears_completion(db_session, active_pairing, learner):
    first = _week_ids(db_session, 1)[0]
    save_assignment_progress(
        db_session, active_pairing.id, first, user_id=learner.id, status="completed"
    )
    update = save_assignment_progress(
        db_session,
        active_pairing.id,
        first,
        user_id=learner.id,
        status=ProgressStatus.IN_PROGRESS,
        notes="Halfway",
    )
    assert update.progress.status is ProgressStatus.IN_PROGRESS
    assert update.progress.completed_at is None
    assert update.progress.notes == "Halfway"


def test_save_progress_rejects_locked_weeks(db_session, active_pairing, learner):
    week_three = _week_ids(db_session, 3)[0]
    with pytest.raises(WeekLockedError):
        save_assignment_progress(
            db_session, active_pairing.id, week_three, user_id=learner.id, status="completed"
        )


def test_save_progress_validates_inputs(db_session, active_pairing, learner, make_profile):
    first = _week_ids(db_session, 1)[0]
    with pytest.raises(ValidationError):
        save_assignment_progress(
            db_session, active_pairing.id, first, user_id=learner.id, status="done"
        )
    with pytest.raises(NotFoundError):
        save_assignment_progress(
            db_session, active_pairing.id, 9999, user_id=learner.id, status="completed"
        )
    outsider = make_profile("outsider")
    with pytest.raises(PermissionDeniedError):
        save_assignment_progress(
            db_session, active_pairing.id, first, user_id=outsider.id, status="completed"
        )


def test_overview_counts_only_the_learners_rows(
    db_session, active_pairing, leader, learner
):
    ids = _week_ids(db_session, 1)
    record_assignment_completion(db_session, active_pairing.id, ids[0], user_id=learner.id)
    record_assignment_completion(db_session, active_pairing.id, ids[1], user_id=leader.id)

    overview = get_progress_overview(db_session, active_pairing.id, profile_id=leader.id)
    week_one = overview.weeks[0]
    assert week_one.completed_assignments == 1
    assert week_one.total_assignments == 3
    assert week_one.is_current and week_one.is_unlocked
    assert not overview.weeks[1].is_unlocked
    assert not overview.journey_complete


def test_week_detail_shows_callers_progress(db_session, active_pairing, learner):
    first = _week_ids(db_session, 1)[0]
    record_assignment_completion(db_session, active_pairing.id, first, user_id=learner.id)

    detail = get_week_detail(
        db_session, active_pairing.id, profile_id=learner.id, week_number=1
    )
    assert detail.week.week_number == 1
    assert len(detail.assignments) == 3
    assert [row.assignment_id for row in detail.progress] == [first]

    with pytest.raises(WeekLockedError):
        get_week_detail(db_session, active_pairing.id, profile_id=learner.id, week_number=2)
    with pytest.raises(ValidationError):
        get_week_detail(db_session, active_pairing.id, profile_id=learner.id, week_number=7)


def test_completion_locks_the_pairing_before_writing_progress(
    db_session, active_pairing, learner, monkeypatch
):
    calls: list[str] = []
    lock = PairingRepository.lock_for_progress
    upsert = AssignmentProgressRepository.upsert

    def recording_lock(self, pairing_id):
        calls.append("lock")
        return lock(self, pairing_id)

    def recording_upsert(self, progress, *, commit=True):
        calls.append("upsert")
        return upsert(self, progress, commit=commit)

    monkeypatch.setattr(PairingRepository, "lock_for_progress", recording_lock)
    monkeypatch.setattr(AssignmentProgressRepository, "upsert", recording_upsert)

    record_assignment_completion(
        db_session, active_pairing.id, _week_ids(db_session, 1)[0], user_id=learner.id
    )
    assert calls == ["lock", "upsert"]


def test_advancement_uses_the_week_read_under_the_lock(
    db_session, active_pairing, learner, monkeypatch
):
    stale = PairingRepository(db_session).get(active_pairing.id)
    _set_current_week(db_session, active_pairing.id, 2)
    monkeypatch.setattr(
        completion_module, "require_participant", lambda session, pairing_id, user_id: stale
    )

    updates = [
        record_assignment_completion(
            db_session, active_pairing.id, assignment_id, user_id=learner.id
        )
        for assignment_id in _week_ids(db_session, 2)
    ]

    assert updates[-1].advanced
    assert PairingRepository(db_session).get(active_pairing.id).current_week == 3


def test_reopening_a_finished_week_does_not_announce_it_again(
    db_session, active_pairing, leader, learner
):
    first, *rest = _week_ids(db_session, 1)
    for assignment_id in [first, *rest]:
        record_assignment_completion(
            db_session, active_pairing.id, assignment_id, user_id=learner.id
        )
    notifications = NotificationRepository(db_session)
    before = len(notifications.list_for_user(leader.id))

    save_assignment_progress(
        db_session, active_pairing.id, first, user_id=learner.id, status="in_progress"
    )
    update = save_assignment_progress(
        db_session, active_pairing.id, first, user_id=learner.id, status="completed"
    )

    assert not update.advanced
    assert update.current_week == 2
    assert len(notifications.list_for_user(leader.id)) == before
