"""Use case saving a participant's status and notes on an assignment."""

from __future__ import annotations

from sqlalchemy.orm import Session

from discipleship.domain.entities import AssignmentProgress, ProgressStatus
from discipleship.domain.exceptions import ValidationError
from discipleship.infrastructure.repositories import AssignmentProgressRepository

from ..access import require_active, require_participant, require_unlocked_week
from ..notifications.events import broadcast
from .record_completion import (
    ProgressUpdate,
    record_assignment_completion,
    require_assignment,
)

MAX_NOTES_LENGTH = 5000


def save_assignment_progress(
    session: Session,
    pairing_id: int,
    assignment_id: int,
    *,
    user_id: str,
    status: ProgressStatus | str,
    notes: str | None = None,
) -> ProgressUpdate:
    """Upsert the caller's progress row; completions go through the advancement rule."""

    try:
        new_status = ProgressStatus(status)
    except ValueError as exc:
        raise ValidationError("Unknown progress status") from exc
    if notes is not None and len(notes) > MAX_NOTES_LENGTH:
        raise ValidationError(f"Notes must be at most {MAX_NOTES_LENGTH} characters")

    pairing = require_participant(session, pairing_id, user_id)
    require_active(pairing)
    assignment = require_assignment(session, assignment_id)
    require_unlocked_week(pairing, assignment.week_number)

    repository = AssignmentProgressRepository(session)
    existing = repository.get(
        pairing_id=pairing_id, assignment_id=assignment_id, user_id=user_id
    )
    prior_status = existing.status if existing else ProgressStatus.NOT_STARTED

    if new_status is ProgressStatus.COMPLETED:
        return record_assignment_completion(
            session,
            pairing_id,
            assignment_id,
            user_id=user_id,
            prior_status=prior_status,
            notes=notes,
        )

    saved = repository.upsert(
        AssignmentProgress(
            id=None,
            pairing_id=pairing_id,
            assignment_id=assignment_id,
            user_id=user_id,
            status=new_status,
            notes=notes if notes is not None else (existing.notes if existing else None),
            completed_at=None,
        )
    )
    broadcast(
        pairing.participant_ids,
        "progress.updated",
        {
            "pairing_id": pairing_id,
            "assignment_id": assignment_id,
            "user_id": user_id,
            "status": new_status.value,
        },
    )
    return ProgressUpdate(progress=saved, current_week=pairing.current_week)


__all__ = ["MAX_NOTES_LENGTH", "save_assignment_progress"]
