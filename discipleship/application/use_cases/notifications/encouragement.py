"""Use case for a leader nudging their learner."""

from __future__ import annotations

from sqlalchemy.orm import Session

from discipleship.domain.entities import CovenantSide, Notification
from discipleship.domain.events import Encouragement
from discipleship.domain.exceptions import PermissionDeniedError, ValidationError

from ..access import require_active, require_participant, require_profile
from .events import emit

MAX_ENCOURAGEMENT_LENGTH = 1000


def send_encouragement(
    session: Session, pairing_id: int, *, sender_id: str, message: str
) -> list[Notification]:
    """Send a free-text encouragement from the leader to the learner."""

    pairing = require_participant(session, pairing_id, sender_id)
    if pairing.side_of(sender_id) is not CovenantSide.LEADER:
        raise PermissionDeniedError("Only the leader can send encouragement")
    require_active(pairing)

    content = (message or "").strip()
    if not content:
        raise ValidationError("Encouragement cannot be empty")
    if len(content) > MAX_ENCOURAGEMENT_LENGTH:
        raise ValidationError(
            f"Encouragement must be at most {MAX_ENCOURAGEMENT_LENGTH} characters"
        )

    leader = require_profile(session, sender_id)
    assert pairing.learner_id is not None
    return emit(
        session,
        Encouragement(
            learner_id=pairing.learner_id,
            leader_name=leader.display_name,
            pairing_id=pairing_id,
            content=content,
        ),
    )


__all__ = ["MAX_ENCOURAGEMENT_LENGTH", "send_encouragement"]
