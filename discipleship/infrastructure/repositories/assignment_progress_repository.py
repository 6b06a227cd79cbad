"""Persistence helpers for assignment progress rows."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from discipleship.domain.entities import AssignmentProgress, ProgressStatus
from discipleship.domain.exceptions import PersistenceError
from discipleship.infrastructure.models import AssignmentModel, AssignmentProgressModel
from discipleship.utils import ensure_naive_utc, ensure_utc

from ._persistence import commit_or_raise, flush_or_raise


class AssignmentProgressRepository:
    """Upsert and query progress keyed by (pairing, assignment, user)."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(
        self, *, pairing_id: int, assignment_id: int, user_id: str
    ) -> AssignmentProgress | None:
        model = self._get_model(pairing_id, assignment_id, user_id)
        return self._to_entity(model) if model else None

    def list_for_pairing(
        self,
        pairing_id: int,
        *,
        user_id: str | None = None,
        week_number: int | None = None,
    ) -> Sequence[AssignmentProgress]:
        query = self.session.query(AssignmentProgressModel).filter(
            AssignmentProgressModel.pairing_id == pairing_id
        )
        if user_id is not None:
            query = query.filter(AssignmentProgressModel.user_id == user_id)
        if week_number is not None:
            query = query.join(
                AssignmentModel,
                AssignmentModel.id == AssignmentProgressModel.assignment_id,
            ).filter(AssignmentModel.week_number == week_number)
        query = query.order_by(AssignmentProgressModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def upsert(
        self, progress: AssignmentProgress, *, commit: bool = True
    ) -> AssignmentProgress:
        """Insert or update the row for the progress' key triple.

        With ``commit=False`` the change is only flushed so it can share a
        transaction with follow-up writes.
        """

        model = self._get_model(
            progress.pairing_id, progress.assignment_id, progress.user_id
        )
        if model is None:
            model = AssignmentProgressModel(
                pairing_id=progress.pairing_id,
                assignment_id=progress.assignment_id,
                user_id=progress.user_id,
            )
            self._apply_entity_to_model(model, progress)
            self.session.add(model)
            try:
                self.session.flush()
            except IntegrityError as exc:
                # Another session inserted the same triple first.
                self.session.rollback()
                model = self._get_model(
                    progress.pairing_id, progress.assignment_id, progress.user_id
                )
                if model is None:
                    raise PersistenceError("Could not save assignment progress") from exc
                self._apply_entity_to_model(model, progress)
        else:
            self._apply_entity_to_model(model, progress)

        if commit:
            commit_or_raise(self.session, "save assignment progress")
            self.session.refresh(model)
        else:
            flush_or_raise(self.session, "save assignment progress")
        return self._to_entity(model)

    def _get_model(
        self, pairing_id: int, assignment_id: int, user_id: str
    ) -> AssignmentProgressModel | None:
        return (
            self.session.query(AssignmentProgressModel)
            .filter(AssignmentProgressModel.pairing_id == pairing_id)
            .filter(AssignmentProgressModel.assignment_id == assignment_id)
            .filter(AssignmentProgressModel.user_id == user_id)
            .first()
        )

    @staticmethod
    def _apply_entity_to_model(
        model: AssignmentProgressModel, progress: AssignmentProgress
    ) -> None:
        model.status = progress.status.value
        model.notes = progress.notes
        model.completed_at = ensure_naive_utc(progress.completed_at)

    @staticmethod
    def _to_entity(model: AssignmentProgressModel) -> AssignmentProgress:
        return AssignmentProgress(
            id=model.id,
            pairing_id=model.pairing_id,
            assignment_id=model.assignment_id,
            user_id=model.user_id,
            status=ProgressStatus(model.status),
            notes=model.notes,
            completed_at=ensure_utc(model.completed_at),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


__all__ = ["AssignmentProgressRepository"]
