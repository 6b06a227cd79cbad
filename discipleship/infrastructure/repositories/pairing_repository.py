"""Persistence helpers for pairing entities.

Writes that other sessions may race on are expressed as conditional
``UPDATE`` statements; each returns whether a row matched so callers can tell
a lost race from a success.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from discipleship.domain.entities import (
    OPEN_PAIRING_STATUSES,
    CovenantSide,
    Pairing,
    PairingStatus,
)
from discipleship.infrastructure.models import PairingModel
from discipleship.utils import ensure_naive_utc, ensure_utc, now_utc_naive

from ._persistence import commit_or_raise, flush_or_raise

_OPEN_STATUS_VALUES = [status.value for status in OPEN_PAIRING_STATUSES]


@dataclass(frozen=True)
class CovenantFlip:
    """Result of signing one side of the covenant."""

    changed: bool
    completed: bool


class PairingRepository:
    """Provide CRUD and compare-and-swap operations for :class:`Pairing`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, pairing_id: int) -> Pairing | None:
        model = self.session.get(PairingModel, pairing_id)
        return self._to_entity(model) if model else None

    def get_joinable_by_code(self, invite_code: str) -> Pairing | None:
        """Return the pending pairing still waiting for a learner with ``invite_code``."""

        model = (
            self.session.query(PairingModel)
            .filter(PairingModel.invite_code == invite_code)
            .filter(PairingModel.status == PairingStatus.PENDING.value)
            .filter(PairingModel.learner_id.is_(None))
            .first()
        )
        return self._to_entity(model) if model else None

    def get_open_for_profile(self, profile_id: str) -> Pairing | None:
        """Return the most recent pending or active pairing involving ``profile_id``."""

        model = (
            self.session.query(PairingModel)
            .filter(
                or_(
                    PairingModel.leader_id == profile_id,
                    PairingModel.learner_id == profile_id,
                )
            )
            .filter(PairingModel.status.in_(_OPEN_STATUS_VALUES))
            .order_by(PairingModel.created_at.desc(), PairingModel.id.desc())
            .first()
        )
        return self._to_entity(model) if model else None

    def invite_code_exists(self, invite_code: str) -> bool:
        query = self.session.query(PairingModel.id).filter(
            PairingModel.invite_code == invite_code
        )
        return query.first() is not None

    def create(self, pairing: Pairing) -> Pairing:
        model = PairingModel(
            leader_id=pairing.leader_id,
            learner_id=pairing.learner_id,
            invite_code=pairing.invite_code,
            status=pairing.status.value,
            current_week=pairing.current_week,
            covenant_accepted_leader=pairing.covenant_accepted_leader,
            covenant_accepted_learner=pairing.covenant_accepted_learner,
            started_at=ensure_naive_utc(pairing.started_at),
        )
        if pairing.created_at is not None:
            model.created_at = ensure_naive_utc(pairing.created_at)
        self.session.add(model)
        commit_or_raise(self.session, "create pairing")
        self.session.refresh(model)
        return self._to_entity(model)

    def replace_invite_code(
        self, pairing_id: int, invite_code: str, *, leader_id: str
    ) -> bool:
        """Overwrite the invite code of an open pairing owned by ``leader_id``."""

        updated = (
            self.session.query(PairingModel)
            .filter(PairingModel.id == pairing_id)
            .filter(PairingModel.leader_id == leader_id)
            .filter(PairingModel.status.in_(_OPEN_STATUS_VALUES))
            .update(
                {
                    PairingModel.invite_code: invite_code,
                    PairingModel.updated_at: now_utc_naive(),
                },
                synchronize_session=False,
            )
        )
        commit_or_raise(self.session, "regenerate invite code")
        return updated == 1

    def claim_learner_seat(
        self, pairing_id: int, learner_id: str, *, started_at: datetime
    ) -> bool:
        """Seat ``learner_id`` only if nobody has claimed the pairing yet."""

        updated = (
            self.session.query(PairingModel)
            .filter(PairingModel.id == pairing_id)
            .filter(PairingModel.learner_id.is_(None))
            .filter(PairingModel.status == PairingStatus.PENDING.value)
            .update(
                {
                    PairingModel.learner_id: learner_id,
                    PairingModel.status: PairingStatus.ACTIVE.value,
                    PairingModel.started_at: ensure_naive_utc(started_at),
                    PairingModel.updated_at: now_utc_naive(),
                },
                synchronize_session=False,
            )
        )
        commit_or_raise(self.session, "join pairing")
        return updated == 1

    def accept_covenant(self, pairing_id: int, side: CovenantSide) -> CovenantFlip:
        """Flip the covenant flag for ``side``.

        Each attempt also pins the other side's flag, so whichever update
        matches tells whether this call completed the covenant. Exactly one
        of two concurrent signers sees ``completed``.
        """

        own, other = (
            (PairingModel.covenant_accepted_leader, PairingModel.covenant_accepted_learner)
            if side is CovenantSide.LEADER
            else (PairingModel.covenant_accepted_learner, PairingModel.covenant_accepted_leader)
        )
        # The other flag only moves forward, so a third attempt settles it.
        for other_signed in (True, False, True):
            updated = (
                self.session.query(PairingModel)
                .filter(PairingModel.id == pairing_id)
                .filter(own.is_(False))
                .filter(other.is_(other_signed))
                .update(
                    {own: True, PairingModel.updated_at: now_utc_naive()},
                    synchronize_session=False,
                )
            )
            if updated == 1:
                commit_or_raise(self.session, "sign covenant")
                return CovenantFlip(changed=True, completed=other_signed)
        commit_or_raise(self.session, "sign covenant")
        return CovenantFlip(changed=False, completed=False)

    def lock_for_progress(self, pairing_id: int) -> Pairing | None:
        """Return the pairing with its row locked until the next commit.

        Progress writes for one pairing run one after another behind this
        lock, so each week tally sees every earlier completion.
        """

        model = (
            self.session.query(PairingModel)
            .filter(PairingModel.id == pairing_id)
            .populate_existing()
            .with_for_update()
            .first()
        )
        return self._to_entity(model) if model else None

    def advance_week(self, pairing_id: int, *, from_week: int) -> bool:
        """Move ``current_week`` from ``from_week`` to the next week.

        The change is flushed but not committed; the caller commits it
        together with the completion that triggered it.
        """

        updated = (
            self.session.query(PairingModel)
            .filter(PairingModel.id == pairing_id)
            .filter(PairingModel.current_week == from_week)
            .update(
                {
                    PairingModel.current_week: from_week + 1,
                    PairingModel.updated_at: now_utc_naive(),
                },
                synchronize_session=False,
            )
        )
        flush_or_raise(self.session, "advance week")
        return updated == 1

    @staticmethod
    def _to_entity(model: PairingModel) -> Pairing:
        return Pairing(
            id=model.id,
            leader_id=model.leader_id,
            learner_id=model.learner_id,
            invite_code=model.invite_code,
            status=PairingStatus(model.status),
            current_week=model.current_week,
            covenant_accepted_leader=bool(model.covenant_accepted_leader),
            covenant_accepted_learner=bool(model.covenant_accepted_learner),
            started_at=ensure_utc(model.started_at),
            completed_at=ensure_utc(model.completed_at),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


__all__ = ["CovenantFlip", "PairingRepository"]
