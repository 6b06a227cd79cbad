"""Read-only curriculum catalog entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AssignmentType(str, Enum):
    READING = "reading"
    REFLECTION = "reflection"
    ACTION = "action"
    DISCUSSION = "discussion"
    PRAYER = "prayer"


@dataclass(frozen=True)
class WeeklyContent:
    """Theme and supporting material for one curriculum week."""

    id: int | None
    week_number: int
    title: str
    description: str
    scripture_reference: str | None = None
    video_url: str | None = None


@dataclass(frozen=True)
class Assignment:
    """A single task that belongs to one curriculum week."""

    id: int | None
    week_number: int
    title: str
    description: str
    assignment_type: AssignmentType
    order_index: int


__all__ = ["Assignment", "AssignmentType", "WeeklyContent"]
