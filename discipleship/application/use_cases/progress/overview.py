"""Read models for the dashboard timeline and the week page."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from discipleship.domain.entities import (
    Assignment,
    AssignmentProgress,
    Pairing,
    Reflection,
    WeeklyContent,
    WeekProgress,
)
from discipleship.domain.exceptions import NotFoundError
from discipleship.domain.progress import build_week_progress, is_journey_complete
from discipleship.infrastructure.repositories import (
    AssignmentProgressRepository,
    CurriculumRepository,
    ReflectionRepository,
)

from ..access import require_participant, require_unlocked_week


@dataclass(frozen=True)
class ProgressOverview:
    pairing: Pairing
    weeks: list[WeekProgress]
    journey_complete: bool


@dataclass(frozen=True)
class WeekDetail:
    week: WeeklyContent
    assignments: Sequence[Assignment]
    progress: Sequence[AssignmentProgress]
    reflections: Sequence[Reflection] = field(default_factory=list)


def get_progress_overview(
    session: Session, pairing_id: int, *, profile_id: str
) -> ProgressOverview:
    """Summarise every week from the learner's completions."""

    pairing = require_participant(session, pairing_id, profile_id)
    curriculum = CurriculumRepository(session)
    catalog = curriculum.list_assignments()

    rows: Sequence[AssignmentProgress] = []
    if pairing.learner_id:
        rows = AssignmentProgressRepository(session).list_for_pairing(
            pairing_id, user_id=pairing.learner_id
        )

    return ProgressOverview(
        pairing=pairing,
        weeks=build_week_progress(pairing, curriculum.list_weeks(), catalog, rows),
        journey_complete=is_journey_complete(pairing, catalog, rows),
    )


def get_week_detail(
    session: Session, pairing_id: int, *, profile_id: str, week_number: int
) -> WeekDetail:
    pairing = require_participant(session, pairing_id, profile_id)
    require_unlocked_week(pairing, week_number)

    curriculum = CurriculumRepository(session)
    week = curriculum.get_week(week_number)
    if week is None:
        raise NotFoundError("Week not found")

    return WeekDetail(
        week=week,
        assignments=curriculum.list_assignments(week_number),
        progress=AssignmentProgressRepository(session).list_for_pairing(
            pairing_id, user_id=profile_id, week_number=week_number
        ),
        reflections=ReflectionRepository(session).list_visible(
            pairing_id, viewer_id=profile_id, week_number=week_number
        ),
    )


__all__ = ["ProgressOverview", "WeekDetail", "get_progress_overview", "get_week_detail"]
