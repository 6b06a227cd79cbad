"""Use cases for editing profile details and preferences."""

from __future__ import annotations

from sqlalchemy.orm import Session

from discipleship.domain.entities import Profile
from discipleship.domain.exceptions import ValidationError
from discipleship.infrastructure.repositories import ProfileRepository

from ..access import require_profile


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def update_profile(
    session: Session,
    profile_id: str,
    *,
    full_name: str | None = None,
    bio: str | None = None,
    phone: str | None = None,
    avatar_url: str | None = None,
) -> Profile:
    """Update the editable profile fields; ``None`` leaves a field unchanged."""

    profile = require_profile(session, profile_id)

    if full_name is not None:
        name = _clean(full_name)
        if not name:
            raise ValidationError("Name cannot be empty")
        profile.full_name = name
    if bio is not None:
        profile.bio = _clean(bio)
    if phone is not None:
        profile.phone = _clean(phone)
    if avatar_url is not None:
        profile.avatar_url = _clean(avatar_url)

    return ProfileRepository(session).update(profile)


def update_notification_settings(
    session: Session,
    profile_id: str,
    *,
    email_notifications: bool | None = None,
    message_notifications: bool | None = None,
    progress_notifications: bool | None = None,
) -> Profile:
    profile = require_profile(session, profile_id)
    if email_notifications is not None:
        profile.email_notifications = email_notifications
    if message_notifications is not None:
        profile.message_notifications = message_notifications
    if progress_notifications is not None:
        profile.progress_notifications = progress_notifications
    return ProfileRepository(session).update(profile)


__all__ = ["update_notification_settings", "update_profile"]
