"""Lookups shared by use cases that act on behalf of a participant."""

from __future__ import annotations

from sqlalchemy.orm import Session

from discipleship.domain.entities import FIRST_WEEK, MAX_WEEK, Pairing, PairingStatus, Profile
from discipleship.domain.exceptions import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    WeekLockedError,
)
from discipleship.infrastructure.repositories import PairingRepository, ProfileRepository


def require_profile(session: Session, profile_id: str) -> Profile:
    profile = ProfileRepository(session).get(profile_id)
    if profile is None:
        raise NotFoundError("Profile not found")
    return profile


def require_participant(session: Session, pairing_id: int, profile_id: str) -> Pairing:
    """Return the pairing if ``profile_id`` sits in it."""

    pairing = PairingRepository(session).get(pairing_id)
    if pairing is None:
        raise NotFoundError("Pairing not found")
    if not pairing.has_participant(profile_id):
        raise PermissionDeniedError("You are not part of this pairing")
    return pairing


def require_active(pairing: Pairing) -> None:
    if pairing.status is not PairingStatus.ACTIVE or not pairing.learner_id:
        raise ValidationError("The pairing has no learner yet")


def require_unlocked_week(pairing: Pairing, week_number: int) -> None:
    if not FIRST_WEEK <= week_number <= MAX_WEEK:
        raise ValidationError(f"Week must be between {FIRST_WEEK} and {MAX_WEEK}")
    if not pairing.is_week_unlocked(week_number):
        raise WeekLockedError(f"Week {week_number} is not unlocked yet")


__all__ = [
    "require_active",
    "require_participant",
    "require_profile",
    "require_unlocked_week",
]
