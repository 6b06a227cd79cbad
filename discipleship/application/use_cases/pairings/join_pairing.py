"""Use case for a learner redeeming an invite code."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from discipleship.domain.entities import Pairing, PairingStatus
from discipleship.domain.events import LearnerJoined
from discipleship.domain.exceptions import ConflictError, NotFoundError, SelfJoinError
from discipleship.domain.invite_codes import normalize_invite_code
from discipleship.infrastructure.repositories import PairingRepository
from discipleship.utils import now_utc

from ..access import require_profile
from ..notifications.events import broadcast, emit

logger = logging.getLogger(__name__)


def join_pairing(session: Session, *, invite_code: str, learner_id: str) -> Pairing:
    """Seat ``learner_id`` in the pending pairing behind ``invite_code``.

    The seat is claimed with a conditional update, so when several learners
    race for one code exactly one of them wins; the rest get
    :class:`ConflictError`, or :class:`NotFoundError` once the code is used.
    """

    code = normalize_invite_code(invite_code)
    repository = PairingRepository(session)

    pairing = repository.get_joinable_by_code(code)
    if pairing is None:
        raise NotFoundError("Invalid or already used code")
    if pairing.leader_id == learner_id:
        raise SelfJoinError("You cannot join your own pairing")

    learner = require_profile(session, learner_id)
    if learner.is_leader():
        raise ConflictError("Leaders cannot join a pairing as learner")
    current = repository.get_open_for_profile(learner_id)
    if current is not None and current.status is PairingStatus.ACTIVE:
        raise ConflictError("You are already in an active pairing")

    assert pairing.id is not None
    if not repository.claim_learner_seat(pairing.id, learner_id, started_at=now_utc()):
        raise ConflictError("This invite code was just used by someone else")

    joined = repository.get(pairing.id)
    if joined is None:
        raise NotFoundError("Pairing not found")
    logger.info("Learner %s joined pairing %s", learner_id, joined.id)

    emit(
        session,
        LearnerJoined(
            leader_id=joined.leader_id,
            learner_name=learner.display_name,
            pairing_id=pairing.id,
        ),
    )
    broadcast(joined.participant_ids, "pairing.updated", {"pairing_id": joined.id})
    return joined


__all__ = ["join_pairing"]
