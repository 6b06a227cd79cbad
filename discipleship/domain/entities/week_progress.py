"""Read model summarising a pairing's progress through one week."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WeekProgress:
    week_number: int
    title: str
    total_assignments: int
    completed_assignments: int
    is_current: bool
    is_unlocked: bool

    @property
    def is_completed(self) -> bool:
        return self.total_assignments > 0 and (
            self.completed_assignments >= self.total_assignments
        )


__all__ = ["WeekProgress"]
