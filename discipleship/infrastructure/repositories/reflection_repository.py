"""Persistence helpers for weekly reflections."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from discipleship.domain.entities import Reflection
from discipleship.infrastructure.models import ReflectionModel
from discipleship.utils import ensure_utc

from ._persistence import commit_or_raise


class ReflectionRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, reflection: Reflection) -> Reflection:
        model = ReflectionModel(
            pairing_id=reflection.pairing_id,
            user_id=reflection.user_id,
            week_number=reflection.week_number,
            reflection_text=reflection.reflection_text,
            is_shared=reflection.is_shared,
        )
        self.session.add(model)
        commit_or_raise(self.session, "save reflection")
        self.session.refresh(model)
        return self._to_entity(model)

    def list_visible(
        self, pairing_id: int, *, viewer_id: str, week_number: int
    ) -> Sequence[Reflection]:
        """Return shared reflections and the viewer's own, newest first."""

        query = (
            self.session.query(ReflectionModel)
            .filter(ReflectionModel.pairing_id == pairing_id)
            .filter(ReflectionModel.week_number == week_number)
            .filter(
                or_(
                    ReflectionModel.is_shared.is_(True),
                    ReflectionModel.user_id == viewer_id,
                )
            )
            .order_by(ReflectionModel.created_at.desc(), ReflectionModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: ReflectionModel) -> Reflection:
        return Reflection(
            id=model.id,
            pairing_id=model.pairing_id,
            user_id=model.user_id,
            week_number=model.week_number,
            reflection_text=model.reflection_text,
            is_shared=bool(model.is_shared),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


__all__ = ["ReflectionRepository"]
