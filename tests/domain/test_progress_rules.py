"""Tests for the pure week completion and advancement rules."""

from discipleship.domain.entities import (
    Assignment,
    AssignmentProgress,
    AssignmentType,
    Pairing,
    PairingStatus,
    ProgressStatus,
    WeeklyContent,
)
from discipleship.domain.progress import (
    WeekCompletion,
    build_week_progress,
    is_journey_complete,
    should_advance,
    tally_week,
)


def _catalog() -> list[Assignment]:
    return [
        Assignment(
            id=week * 10 + index,
            week_number=week,
            title=f"Week {week} task {index}",
            description=None,
            assignment_type=AssignmentType.READING,
            order_index=index,
        )
        for week in range(1, 7)
        for index in range(1, 4)
    ]


def _done(assignment_id: int, status: ProgressStatus = ProgressStatus.COMPLETED):
    return AssignmentProgress(
        id=None,
        pairing_id=1,
        assignment_id=assignment_id,
        user_id="learner",
        status=status,
    )


def _pairing(current_week: int = 1) -> Pairing:
    return Pairing(
        id=1,
        leader_id="leader",
        learner_id="learner",
        invite_code="AB3D9F",
        status=PairingStatus.ACTIVE,
        current_week=current_week,
    )


def test_tally_counts_distinct_completed_assignments_of_the_week():
    rows = [_done(11), _done(11), _done(12, ProgressStatus.IN_PROGRESS), _done(21)]
    tally = tally_week(1, _catalog(), rows)
    assert tally == WeekCompletion(week_number=1, total=3, completed=1)
    assert not tally.is_complete


def test_empty_week_is_never_complete():
    assert not WeekCompletion(week_number=3, total=0, completed=0).is_complete


def test_should_advance_only_for_the_current_week():
    complete_week_one = tally_week(1, _catalog(), [_done(11), _done(12), _done(13)])
    assert should_advance(_pairing(1), complete_week_one)
    assert not should_advance(_pairing(2), complete_week_one)


def test_should_not_advance_past_the_final_week():
    rows = [_done(61), _done(62), _done(63)]
    complete_week_six = tally_week(6, _catalog(), rows)
    assert complete_week_six.is_complete
    assert not should_advance(_pairing(6), complete_week_six)
    assert is_journey_complete(_pairing(6), _catalog(), rows)


def test_journey_is_not_complete_before_week_six():
    rows = [_done(61), _done(62), _done(63)]
    assert not is_journey_complete(_pairing(5), _catalog(), rows)


def test_week_progress_marks_current_and_unlocked_weeks():
    weeks = [
        WeeklyContent(
            id=week,
            week_number=week,
            title=f"Theme {week}",
            description=None,
            scripture_reference=None,
            video_url=None,
        )
        for week in range(6, 0, -1)
    ]
    summary = build_week_progress(
        _pairing(2), weeks, _catalog(), [_done(11), _done(12), _done(13), _done(21)]
    )

    assert [item.week_number for item in summary] == [1, 2, 3, 4, 5, 6]
    assert summary[0].is_completed and summary[0].is_unlocked
    assert summary[1].is_current and summary[1].completed_assignments == 1
    assert not summary[2].is_unlocked
