"""Use cases for reading pairings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from discipleship.domain.entities import Pairing
from discipleship.infrastructure.repositories import PairingRepository

from ..access import require_participant


def get_current_pairing(session: Session, profile_id: str) -> Pairing | None:
    """Return the newest pending or active pairing of ``profile_id``."""

    return PairingRepository(session).get_open_for_profile(profile_id)


def get_pairing_for_participant(
    session: Session, pairing_id: int, profile_id: str
) -> Pairing:
    return require_participant(session, pairing_id, profile_id)


__all__ = ["get_current_pairing", "get_pairing_for_participant"]
