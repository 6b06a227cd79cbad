"""Pairing schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from discipleship.domain.entities import PairingStatus


class PairingRead(BaseModel):
    id: int
    leader_id: str
    learner_id: str | None
    invite_code: str
    status: PairingStatus
    current_week: int
    covenant_accepted_leader: bool
    covenant_accepted_learner: bool
    covenant_complete: bool
    started_at: datetime | None
    completed_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class PartnerRead(BaseModel):
    id: str
    full_name: str | None
    avatar_url: str | None
    is_online: bool = False


class CurrentPairingRead(BaseModel):
    """Pairing of the caller, with the partner's public details."""

    pairing: PairingRead | None = None
    partner: PartnerRead | None = None
    unread_messages: int = 0


class JoinPairingRequest(BaseModel):
    invite_code: str = Field(..., min_length=1, max_length=20)


class EncouragementRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=1000)


__all__ = [
    "CurrentPairingRead",
    "EncouragementRequest",
    "JoinPairingRequest",
    "PairingRead",
    "PartnerRead",
]
