"""Domain entity linking one leader with at most one learner."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

FIRST_WEEK = 1
MAX_WEEK = 6


class PairingStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


OPEN_PAIRING_STATUSES = (PairingStatus.PENDING, PairingStatus.ACTIVE)


class CovenantSide(str, Enum):
    LEADER = "leader"
    LEARNER = "learner"

    @property
    def other(self) -> "CovenantSide":
        if self is CovenantSide.LEADER:
            return CovenantSide.LEARNER
        return CovenantSide.LEADER


@dataclass
class Pairing:
    """Relationship record shared by a leader and a learner.

    ``status`` is ``active`` exactly when ``learner_id`` is set and
    ``pending`` while it is empty. ``current_week`` only moves forward and
    never exceeds :data:`MAX_WEEK`. Covenant flags never revert once set.
    """

    id: int | None
    leader_id: str
    learner_id: str | None
    invite_code: str
    status: PairingStatus = PairingStatus.PENDING
    current_week: int = FIRST_WEEK
    covenant_accepted_leader: bool = False
    covenant_accepted_learner: bool = False
    started_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def covenant_complete(self) -> bool:
        return self.covenant_accepted_leader and self.covenant_accepted_learner

    @property
    def participant_ids(self) -> tuple[str, ...]:
        if self.learner_id:
            return (self.leader_id, self.learner_id)
        return (self.leader_id,)

    def has_participant(self, profile_id: str) -> bool:
        return profile_id in self.participant_ids

    def side_of(self, profile_id: str) -> CovenantSide | None:
        """Return the seat ``profile_id`` occupies, or ``None`` for outsiders."""

        if profile_id == self.leader_id:
            return CovenantSide.LEADER
        if self.learner_id is not None and profile_id == self.learner_id:
            return CovenantSide.LEARNER
        return None

    def partner_id(self, profile_id: str) -> str | None:
        side = self.side_of(profile_id)
        if side is CovenantSide.LEADER:
            return self.learner_id
        if side is CovenantSide.LEARNER:
            return self.leader_id
        return None

    def has_signed(self, side: CovenantSide) -> bool:
        if side is CovenantSide.LEADER:
            return self.covenant_accepted_leader
        return self.covenant_accepted_learner

    def is_week_unlocked(self, week_number: int) -> bool:
        return FIRST_WEEK <= week_number <= self.current_week


__all__ = [
    "CovenantSide",
    "FIRST_WEEK",
    "MAX_WEEK",
    "OPEN_PAIRING_STATUSES",
    "Pairing",
    "PairingStatus",
]
