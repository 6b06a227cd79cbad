"""Domain entity representing a participant profile."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """Seat a profile takes in a pairing."""

    LEADER = "leader"
    LEARNER = "learner"


@dataclass
class Profile:
    """Identity and preferences of a person using the application."""

    id: str
    email: str | None
    full_name: str | None
    role: UserRole | None
    bio: str | None = None
    phone: str | None = None
    avatar_url: str | None = None
    onboarding_complete: bool = False
    email_notifications: bool = True
    message_notifications: bool = True
    progress_notifications: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def display_name(self) -> str:
        """Name shown to the partner, falling back to a neutral label."""

        name = (self.full_name or "").strip()
        return name or "Your partner"

    def is_leader(self) -> bool:
        return self.role is UserRole.LEADER

    def is_learner(self) -> bool:
        return self.role is UserRole.LEARNER


__all__ = ["Profile", "UserRole"]
