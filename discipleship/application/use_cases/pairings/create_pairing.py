"""Use cases for opening a pairing and rotating its invite code."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from discipleship.domain.entities import Pairing, PairingStatus
from discipleship.domain.exceptions import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from discipleship.domain.invite_codes import generate_invite_code
from discipleship.infrastructure.repositories import PairingRepository
from discipleship.utils import now_utc

from ..access import require_profile
from ..notifications.events import broadcast

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 10


def _unique_invite_code(repository: PairingRepository) -> str:
    for _ in range(MAX_CODE_ATTEMPTS):
        code = generate_invite_code()
        if not repository.invite_code_exists(code):
            return code
    raise ConflictError("Could not generate a unique invite code")


def create_pairing(session: Session, *, leader_id: str) -> Pairing:
    """Open a pending pairing for ``leader_id`` with a fresh invite code."""

    leader = require_profile(session, leader_id)
    if not leader.is_leader():
        raise ValidationError("Only leaders can create a pairing")

    repository = PairingRepository(session)
    if repository.get_open_for_profile(leader_id) is not None:
        raise ConflictError("You already have an open pairing")

    pairing = repository.create(
        Pairing(
            id=None,
            leader_id=leader_id,
            learner_id=None,
            invite_code=_unique_invite_code(repository),
            status=PairingStatus.PENDING,
            created_at=now_utc(),
        )
    )
    logger.info("Leader %s opened pairing %s", leader_id, pairing.id)
    return pairing


def regenerate_invite_code(
    session: Session, pairing_id: int, *, leader_id: str
) -> Pairing:
    """Replace the invite code; the previous code stops working at once."""

    repository = PairingRepository(session)
    code = _unique_invite_code(repository)
    if not repository.replace_invite_code(pairing_id, code, leader_id=leader_id):
        raise PermissionDeniedError("Only the leader of an open pairing can do this")

    pairing = repository.get(pairing_id)
    if pairing is None:
        raise NotFoundError("Pairing not found")
    broadcast([leader_id], "pairing.updated", {"pairing_id": pairing_id})
    return pairing


__all__ = ["MAX_CODE_ATTEMPTS", "create_pairing", "regenerate_invite_code"]
