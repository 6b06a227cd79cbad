"""Use cases for writing and reading weekly reflections."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from discipleship.domain.entities import Reflection
from discipleship.domain.exceptions import ValidationError
from discipleship.infrastructure.repositories import ReflectionRepository
from discipleship.utils import now_utc

from ..access import require_participant, require_unlocked_week

MAX_REFLECTION_LENGTH = 10000


def create_reflection(
    session: Session,
    pairing_id: int,
    *,
    user_id: str,
    week_number: int,
    text: str,
    is_shared: bool = False,
) -> Reflection:
    body = (text or "").strip()
    if not body:
        raise ValidationError("Reflection cannot be empty")
    if len(body) > MAX_REFLECTION_LENGTH:
        raise ValidationError(
            f"Reflection must be at most {MAX_REFLECTION_LENGTH} characters"
        )

    pairing = require_participant(session, pairing_id, user_id)
    require_unlocked_week(pairing, week_number)

    now = now_utc()
    return ReflectionRepository(session).create(
        Reflection(
            id=None,
            pairing_id=pairing_id,
            user_id=user_id,
            week_number=week_number,
            reflection_text=body,
            is_shared=is_shared,
            created_at=now,
            updated_at=now,
        )
    )


def list_reflections(
    session: Session, pairing_id: int, *, viewer_id: str, week_number: int
) -> Sequence[Reflection]:
    """Return shared reflections plus the viewer's private ones, newest first."""

    pairing = require_participant(session, pairing_id, viewer_id)
    require_unlocked_week(pairing, week_number)
    return ReflectionRepository(session).list_visible(
        pairing_id, viewer_id=viewer_id, week_number=week_number
    )


__all__ = ["MAX_REFLECTION_LENGTH", "create_reflection", "list_reflections"]
