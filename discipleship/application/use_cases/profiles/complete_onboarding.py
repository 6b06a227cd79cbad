"""Use case for finishing the onboarding wizard."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from discipleship.domain.entities import Pairing, Profile, UserRole
from discipleship.domain.exceptions import ValidationError
from discipleship.infrastructure.repositories import PairingRepository, ProfileRepository

from ..access import require_profile
from ..pairings.create_pairing import create_pairing

logger = logging.getLogger(__name__)


def complete_onboarding(
    session: Session,
    profile_id: str,
    *,
    full_name: str,
    role: UserRole | str,
    bio: str | None = None,
    phone: str | None = None,
) -> tuple[Profile, Pairing | None]:
    """Record name and role, and open a pairing for new leaders.

    The role can be chosen once. Returns the profile together with the
    leader's pending pairing, or ``None`` for learners, who join later with
    an invite code.
    """

    try:
        chosen_role = UserRole(role)
    except ValueError as exc:
        raise ValidationError("Role must be 'leader' or 'learner'") from exc

    name = (full_name or "").strip()
    if not name:
        raise ValidationError("Name cannot be empty")

    profile = require_profile(session, profile_id)
    if profile.role is not None and profile.role is not chosen_role:
        raise ValidationError("Role cannot be changed after it has been chosen")

    profile.full_name = name
    profile.role = chosen_role
    if bio is not None:
        profile.bio = bio.strip() or None
    if phone is not None:
        profile.phone = phone.strip() or None
    profile.onboarding_complete = True
    profile = ProfileRepository(session).update(profile)
    logger.info("Profile %s onboarded as %s", profile_id, chosen_role.value)

    if chosen_role is not UserRole.LEADER:
        return profile, None

    existing = PairingRepository(session).get_open_for_profile(profile_id)
    if existing is not None:
        return profile, existing
    return profile, create_pairing(session, leader_id=profile_id)


__all__ = ["complete_onboarding"]
