"""Domain entity tracking a user's work on one assignment."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ProgressStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class AssignmentProgress:
    """Completion record keyed by pairing, assignment and user."""

    id: int | None
    pairing_id: int
    assignment_id: int
    user_id: str
    status: ProgressStatus = ProgressStatus.NOT_STARTED
    notes: str | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status is ProgressStatus.COMPLETED


__all__ = ["AssignmentProgress", "ProgressStatus"]
