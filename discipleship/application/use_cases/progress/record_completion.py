"""Use case recording a completed assignment and unlocking the next week."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from discipleship.domain.entities import (
    Assignment,
    AssignmentProgress,
    Pairing,
    ProgressStatus,
)
from discipleship.domain.events import AssignmentCompleted, WeekCompleted, WeekUnlocked
from discipleship.domain.exceptions import NotFoundError
from discipleship.domain.progress import WeekCompletion, should_advance, tally_week
from discipleship.infrastructure.repositories import (
    AssignmentProgressRepository,
    CurriculumRepository,
    PairingRepository,
    ProfileRepository,
    commit_or_raise,
)
from discipleship.utils import now_utc

from ..access import require_active, require_participant
from ..notifications.events import broadcast, emit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressUpdate:
    """Outcome of saving progress on one assignment."""

    progress: AssignmentProgress
    current_week: int
    week_completion: WeekCompletion | None = None
    advanced: bool = False


def require_assignment(session: Session, assignment_id: int) -> Assignment:
    assignment = CurriculumRepository(session).get_assignment(assignment_id)
    if assignment is None:
        raise NotFoundError("Assignment not found")
    return assignment


def record_assignment_completion(
    session: Session,
    pairing_id: int,
    assignment_id: int,
    *,
    user_id: str,
    prior_status: ProgressStatus | None = None,
    notes: str | None = None,
) -> ProgressUpdate:
    """Mark the assignment completed and advance the pairing when due.

    The pairing row stays locked from before the upsert until the commit,
    so completions for one pairing are tallied one after another and the
    last of them always sees the whole week. The increment is also
    conditional on the ``current_week`` observed under the lock. Completing
    an assignment from a week other than the current one is recorded but
    never advances anything. Notifications go out after the commit.
    """

    pairing = require_participant(session, pairing_id, user_id)
    require_active(pairing)
    assignment = require_assignment(session, assignment_id)

    pairing_repository = PairingRepository(session)
    locked = pairing_repository.lock_for_progress(pairing_id)
    if locked is None:
        raise NotFoundError("Pairing not found")
    pairing = locked

    progress_repository = AssignmentProgressRepository(session)
    existing = progress_repository.get(
        pairing_id=pairing_id, assignment_id=assignment_id, user_id=user_id
    )
    if prior_status is None:
        prior_status = existing.status if existing else ProgressStatus.NOT_STARTED
    newly_completed = prior_status is not ProgressStatus.COMPLETED

    completed_at = now_utc()
    if existing is not None and existing.is_completed and existing.completed_at:
        completed_at = existing.completed_at

    saved = progress_repository.upsert(
        AssignmentProgress(
            id=None,
            pairing_id=pairing_id,
            assignment_id=assignment_id,
            user_id=user_id,
            status=ProgressStatus.COMPLETED,
            notes=notes if notes is not None else (existing.notes if existing else None),
            completed_at=completed_at,
        ),
        commit=False,
    )

    week_number = assignment.week_number
    learner_rows = progress_repository.list_for_pairing(
        pairing_id, user_id=pairing.learner_id, week_number=week_number
    )
    completion = tally_week(
        week_number,
        CurriculumRepository(session).list_assignments(week_number),
        learner_rows,
    )

    advanced = False
    if should_advance(pairing, completion):
        advanced = pairing_repository.advance_week(
            pairing_id, from_week=pairing.current_week
        )
    commit_or_raise(session, "record assignment completion")

    current_week = pairing.current_week + 1 if advanced else pairing.current_week
    if advanced:
        logger.info("Pairing %s advanced to week %s", pairing_id, current_week)

    _notify(
        session,
        pairing=pairing,
        assignment=assignment,
        user_id=user_id,
        completion=completion,
        newly_completed=newly_completed,
        unlocked_week=current_week if advanced else None,
    )
    broadcast(
        pairing.participant_ids,
        "progress.updated",
        {
            "pairing_id": pairing_id,
            "assignment_id": assignment_id,
            "user_id": user_id,
            "status": ProgressStatus.COMPLETED.value,
        },
    )
    if advanced:
        broadcast(
            pairing.participant_ids,
            "pairing.updated",
            {"pairing_id": pairing_id, "current_week": current_week},
        )

    return ProgressUpdate(
        progress=saved,
        current_week=current_week,
        week_completion=completion,
        advanced=advanced,
    )


def _notify(
    session: Session,
    *,
    pairing: Pairing,
    assignment: Assignment,
    user_id: str,
    completion: WeekCompletion,
    newly_completed: bool,
    unlocked_week: int | None,
) -> None:
    assert pairing.id is not None and pairing.learner_id is not None
    by_learner = user_id == pairing.learner_id
    # Weeks behind the current one were already finished and announced.
    already_finished = assignment.week_number < pairing.current_week

    if by_learner and newly_completed and not already_finished:
        learner = ProfileRepository(session).get(user_id)
        learner_name = learner.display_name if learner else "Your learner"
        emit(
            session,
            AssignmentCompleted(
                leader_id=pairing.leader_id,
                learner_name=learner_name,
                pairing_id=pairing.id,
                assignment_title=assignment.title,
                week_number=assignment.week_number,
            ),
        )
        if completion.is_complete:
            emit(
                session,
                WeekCompleted(
                    partner_id=pairing.leader_id,
                    completed_by_name=learner_name,
                    pairing_id=pairing.id,
                    week_number=completion.week_number,
                    week_title=_week_title(session, completion.week_number),
                ),
            )

    if unlocked_week is not None:
        emit(
            session,
            WeekUnlocked(
                leader_id=pairing.leader_id,
                learner_id=pairing.learner_id,
                pairing_id=pairing.id,
                week_number=unlocked_week,
                week_title=_week_title(session, unlocked_week),
            ),
        )


def _week_title(session: Session, week_number: int) -> str:
    week = CurriculumRepository(session).get_week(week_number)
    return week.title if week else f"Week {week_number}"


__all__ = ["ProgressUpdate", "record_assignment_completion", "require_assignment"]
