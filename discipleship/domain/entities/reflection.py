"""Domain entity representing a weekly written reflection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Reflection:
    """Free-text reflection a participant writes for a curriculum week.

    Unshared reflections are visible only to their author.
    """

    id: int | None
    pairing_id: int
    user_id: str
    week_number: int
    reflection_text: str
    is_shared: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Reflection"]
