"""Curriculum catalog schemas."""

from pydantic import BaseModel, ConfigDict

from discipleship.domain.entities import AssignmentType


class WeeklyContentRead(BaseModel):
    id: int
    week_number: int
    title: str
    description: str | None
    scripture_reference: str | None
    video_url: str | None

    model_config = ConfigDict(from_attributes=True)


class AssignmentRead(BaseModel):
    id: int
    week_number: int
    title: str
    description: str | None
    assignment_type: AssignmentType
    order_index: int

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AssignmentRead", "WeeklyContentRead"]
