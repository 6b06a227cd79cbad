"""Use cases for looking up and lazily creating profiles."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from discipleship.domain.entities import Profile
from discipleship.domain.exceptions import PersistenceError
from discipleship.infrastructure.repositories import ProfileRepository
from discipleship.utils import now_utc

from ..access import require_profile

logger = logging.getLogger(__name__)


def ensure_profile(session: Session, subject: str, *, email: str | None = None) -> Profile:
    """Return the profile for ``subject``, creating an empty one on first sight."""

    repository = ProfileRepository(session)
    profile = repository.get(subject)
    if profile is not None:
        if email and not profile.email:
            profile.email = email
            profile = repository.update(profile)
        return profile

    try:
        created = repository.create(
            Profile(
                id=subject,
                email=email,
                full_name=None,
                role=None,
                created_at=now_utc(),
            )
        )
    except PersistenceError:
        # A concurrent request created it first.
        existing = repository.get(subject)
        if existing is None:
            raise
        return existing
    logger.info("Created profile %s", subject)
    return created


def get_profile(session: Session, profile_id: str) -> Profile:
    return require_profile(session, profile_id)


__all__ = ["ensure_profile", "get_profile"]
