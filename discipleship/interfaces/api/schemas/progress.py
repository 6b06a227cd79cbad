"""Assignment progress schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from discipleship.domain.entities import ProgressStatus

from .curriculum import AssignmentRead, WeeklyContentRead
from .reflection import ReflectionRead


class AssignmentProgressRead(BaseModel):
    id: int
    pairing_id: int
    assignment_id: int
    user_id: str
    status: ProgressStatus
    notes: str | None
    completed_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class AssignmentProgressUpdate(BaseModel):
    status: ProgressStatus
    notes: str | None = Field(default=None, max_length=5000)


class ProgressUpdateRead(BaseModel):
    progress: AssignmentProgressRead
    current_week: int
    advanced: bool


class WeekProgressRead(BaseModel):
    week_number: int
    title: str
    total_assignments: int
    completed_assignments: int
    is_current: bool
    is_unlocked: bool
    is_completed: bool

    model_config = ConfigDict(from_attributes=True)


class ProgressOverviewRead(BaseModel):
    pairing_id: int
    current_week: int
    weeks: list[WeekProgressRead]
    journey_complete: bool


class WeekDetailRead(BaseModel):
    week: WeeklyContentRead
    assignments: list[AssignmentRead]
    progress: list[AssignmentProgressRead]
    reflections: list[ReflectionRead]


__all__ = [
    "AssignmentProgressRead",
    "AssignmentProgressUpdate",
    "ProgressOverviewRead",
    "ProgressUpdateRead",
    "WeekDetailRead",
    "WeekProgressRead",
]
