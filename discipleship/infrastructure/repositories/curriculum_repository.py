"""Read access to the curriculum catalog plus the seeding writes."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from discipleship.domain.entities import Assignment, AssignmentType, WeeklyContent
from discipleship.infrastructure.models import AssignmentModel, WeeklyContentModel

from ._persistence import commit_or_raise


class CurriculumRepository:
    """Query weekly content and assignments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_weeks(self) -> Sequence[WeeklyContent]:
        query = self.session.query(WeeklyContentModel).order_by(
            WeeklyContentModel.week_number.asc()
        )
        return [self._week_to_entity(model) for model in query.all()]

    def get_week(self, week_number: int) -> WeeklyContent | None:
        model = (
            self.session.query(WeeklyContentModel)
            .filter(WeeklyContentModel.week_number == week_number)
            .first()
        )
        return self._week_to_entity(model) if model else None

    def list_assignments(self, week_number: int | None = None) -> Sequence[Assignment]:
        query = self.session.query(AssignmentModel)
        if week_number is not None:
            query = query.filter(AssignmentModel.week_number == week_number)
        query = query.order_by(
            AssignmentModel.week_number.asc(),
            AssignmentModel.order_index.asc(),
            AssignmentModel.id.asc(),
        )
        return [self._assignment_to_entity(model) for model in query.all()]

    def get_assignment(self, assignment_id: int) -> Assignment | None:
        model = self.session.get(AssignmentModel, assignment_id)
        return self._assignment_to_entity(model) if model else None

    def add_week(self, week: WeeklyContent) -> WeeklyContent:
        model = WeeklyContentModel(
            week_number=week.week_number,
            title=week.title,
            description=week.description,
            scripture_reference=week.scripture_reference,
            video_url=week.video_url,
        )
        self.session.add(model)
        commit_or_raise(self.session, "store weekly content")
        self.session.refresh(model)
        return self._week_to_entity(model)

    def add_assignment(self, assignment: Assignment) -> Assignment:
        model = AssignmentModel(
            week_number=assignment.week_number,
            title=assignment.title,
            description=assignment.description,
            assignment_type=assignment.assignment_type.value,
            order_index=assignment.order_index,
        )
        self.session.add(model)
        commit_or_raise(self.session, "store assignment")
        self.session.refresh(model)
        return self._assignment_to_entity(model)

    @staticmethod
    def _week_to_entity(model: WeeklyContentModel) -> WeeklyContent:
        return WeeklyContent(
            id=model.id,
            week_number=model.week_number,
            title=model.title,
            description=model.description,
            scripture_reference=model.scripture_reference,
            video_url=model.video_url,
        )

    @staticmethod
    def _assignment_to_entity(model: AssignmentModel) -> Assignment:
        return Assignment(
            id=model.id,
            week_number=model.week_number,
            title=model.title,
            description=model.description,
            assignment_type=AssignmentType(model.assignment_type),
            order_index=model.order_index,
        )


__all__ = ["CurriculumRepository"]
