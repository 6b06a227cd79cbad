"""Week completion and advancement rules.

These functions are pure: they receive catalog and progress snapshots and
return decisions, leaving persistence and notifications to the use cases.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .entities import (
    MAX_WEEK,
    Assignment,
    AssignmentProgress,
    Pairing,
    WeeklyContent,
    WeekProgress,
)


@dataclass(frozen=True)
class WeekCompletion:
    """Completion tally for one curriculum week."""

    week_number: int
    total: int
    completed: int

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and self.completed >= self.total


def count_completed(
    week_assignments: Sequence[Assignment],
    progress_rows: Iterable[AssignmentProgress],
) -> int:
    """Count distinct ``week_assignments`` with a completed progress row."""

    week_ids = {assignment.id for assignment in week_assignments}
    completed_ids = {
        row.assignment_id
        for row in progress_rows
        if row.is_completed and row.assignment_id in week_ids
    }
    return len(completed_ids)


def tally_week(
    week_number: int,
    catalog: Sequence[Assignment],
    progress_rows: Iterable[AssignmentProgress],
) -> WeekCompletion:
    week_assignments = [a for a in catalog if a.week_number == week_number]
    return WeekCompletion(
        week_number=week_number,
        total=len(week_assignments),
        completed=count_completed(week_assignments, progress_rows),
    )


def should_advance(pairing: Pairing, completion: WeekCompletion) -> bool:
    """Return ``True`` when finishing ``completion`` unlocks the next week.

    Only the pairing's current week can unlock anything, and nothing unlocks
    past the final week.
    """

    return (
        completion.is_complete
        and completion.week_number == pairing.current_week
        and pairing.current_week < MAX_WEEK
    )


def is_journey_complete(
    pairing: Pairing,
    catalog: Sequence[Assignment],
    progress_rows: Iterable[AssignmentProgress],
) -> bool:
    if pairing.current_week < MAX_WEEK:
        return False
    return tally_week(MAX_WEEK, catalog, progress_rows).is_complete


def build_week_progress(
    pairing: Pairing,
    weeks: Sequence[WeeklyContent],
    catalog: Sequence[Assignment],
    progress_rows: Sequence[AssignmentProgress],
) -> list[WeekProgress]:
    """Summarise every curriculum week for the dashboard timeline."""

    summaries: list[WeekProgress] = []
    for week in sorted(weeks, key=lambda item: item.week_number):
        tally = tally_week(week.week_number, catalog, progress_rows)
        summaries.append(
            WeekProgress(
                week_number=week.week_number,
                title=week.title,
                total_assignments=tally.total,
                completed_assignments=tally.completed,
                is_current=week.week_number == pairing.current_week,
                is_unlocked=pairing.is_week_unlocked(week.week_number),
            )
        )
    return summaries


__all__ = [
    "WeekCompletion",
    "build_week_progress",
    "count_completed",
    "is_journey_complete",
    "should_advance",
    "tally_week",
]
