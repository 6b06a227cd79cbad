"""Persistence layer for profile data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from discipleship.domain.entities import Profile, UserRole
from discipleship.infrastructure.models import ProfileModel
from discipleship.utils import ensure_naive_utc, ensure_utc

from ._persistence import commit_or_raise


class ProfileRepository:
    """Provide CRUD operations for :class:`Profile` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, profile_id: str) -> Profile | None:
        model = self.session.get(ProfileModel, profile_id)
        return self._to_entity(model) if model else None

    def get_map_by_ids(self, profile_ids: Sequence[str]) -> dict[str, Profile]:
        unique_ids = {profile_id for profile_id in profile_ids if profile_id}
        if not unique_ids:
            return {}
        query = self.session.query(ProfileModel).filter(ProfileModel.id.in_(unique_ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    def create(self, profile: Profile) -> Profile:
        model = ProfileModel(id=profile.id)
        self._apply_entity_to_model(model, profile)
        if profile.created_at is not None:
            model.created_at = ensure_naive_utc(profile.created_at)
        self.session.add(model)
        commit_or_raise(self.session, "create profile")
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, profile: Profile) -> Profile:
        model = self.session.get(ProfileModel, profile.id)
        if model is None:
            msg = f"Profile with id {profile.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, profile)
        self.session.add(model)
        commit_or_raise(self.session, "update profile")
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: ProfileModel, profile: Profile) -> None:
        model.email = profile.email
        model.full_name = profile.full_name
        model.role = profile.role.value if profile.role else None
        model.bio = profile.bio
        model.phone = profile.phone
        model.avatar_url = profile.avatar_url
        model.onboarding_complete = profile.onboarding_complete
        model.email_notifications = profile.email_notifications
        model.message_notifications = profile.message_notifications
        model.progress_notifications = profile.progress_notifications

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            email=model.email,
            full_name=model.full_name,
            role=UserRole(model.role) if model.role else None,
            bio=model.bio,
            phone=model.phone,
            avatar_url=model.avatar_url,
            onboarding_complete=bool(model.onboarding_complete),
            email_notifications=bool(model.email_notifications),
            message_notifications=bool(model.message_notifications),
            progress_notifications=bool(model.progress_notifications),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


__all__ = ["ProfileRepository"]
