"""Read access to weekly content and assignments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from discipleship.domain.entities import FIRST_WEEK, MAX_WEEK, Assignment, WeeklyContent
from discipleship.domain.exceptions import NotFoundError, ValidationError
from discipleship.infrastructure.repositories import CurriculumRepository


def _check_week(week_number: int) -> None:
    if not FIRST_WEEK <= week_number <= MAX_WEEK:
        raise ValidationError(f"Week must be between {FIRST_WEEK} and {MAX_WEEK}")


def list_weekly_content(session: Session) -> Sequence[WeeklyContent]:
    return CurriculumRepository(session).list_weeks()


def get_weekly_content(session: Session, week_number: int) -> WeeklyContent:
    _check_week(week_number)
    week = CurriculumRepository(session).get_week(week_number)
    if week is None:
        raise NotFoundError("Week not found")
    return week


def list_assignments(
    session: Session, week_number: int | None = None
) -> Sequence[Assignment]:
    """Return assignments ordered by week and position, optionally for one week."""

    if week_number is not None:
        _check_week(week_number)
    return CurriculumRepository(session).list_assignments(week_number)


__all__ = ["get_weekly_content", "list_assignments", "list_weekly_content"]
