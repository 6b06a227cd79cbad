"""Use case for signing the discipleship covenant."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from discipleship.domain.entities import Pairing
from discipleship.domain.events import CovenantComplete, CovenantSigned, DomainEvent
from discipleship.domain.exceptions import NotFoundError
from discipleship.infrastructure.repositories import PairingRepository, ProfileRepository

from ..access import require_active, require_participant
from ..notifications.events import broadcast, emit

logger = logging.getLogger(__name__)


def _covenant_event(
    session: Session, pairing: Pairing, signer_id: str, *, completed: bool
) -> DomainEvent:
    profiles = ProfileRepository(session).get_map_by_ids(list(pairing.participant_ids))

    def name_of(profile_id: str) -> str:
        profile = profiles.get(profile_id)
        return profile.display_name if profile else "Your partner"

    assert pairing.id is not None and pairing.learner_id is not None
    if completed:
        return CovenantComplete(
            leader_id=pairing.leader_id,
            leader_name=name_of(pairing.leader_id),
            learner_id=pairing.learner_id,
            learner_name=name_of(pairing.learner_id),
            pairing_id=pairing.id,
        )
    partner_id = pairing.partner_id(signer_id)
    assert partner_id is not None
    return CovenantSigned(
        partner_id=partner_id,
        signer_name=name_of(signer_id),
        pairing_id=pairing.id,
    )


def sign_covenant(session: Session, pairing_id: int, *, profile_id: str) -> Pairing:
    """Sign the covenant on the caller's side of the pairing.

    Signing again is a no-op that notifies nobody. Whether this signature
    completed the covenant is decided by the same update that flips the
    flag, never by re-reading the row afterwards.
    """

    pairing = require_participant(session, pairing_id, profile_id)
    require_active(pairing)
    side = pairing.side_of(profile_id)
    assert side is not None

    repository = PairingRepository(session)
    flip = repository.accept_covenant(pairing_id, side)
    signed = repository.get(pairing_id)
    if signed is None:
        raise NotFoundError("Pairing not found")
    if not flip.changed:
        return signed

    logger.info("Pairing %s covenant signed by %s side", pairing_id, side.value)
    emit(session, _covenant_event(session, signed, profile_id, completed=flip.completed))
    broadcast(signed.participant_ids, "pairing.updated", {"pairing_id": pairing_id})
    return signed


__all__ = ["sign_covenant"]
