"""SQLAlchemy model for leader/learner pairings."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import expression

from discipleship.infrastructure.database import Base
from discipleship.utils import now_utc_naive


class PairingModel(Base):
    """Database representation of a pairing and its covenant state."""

    __tablename__ = "pairing"

    id = Column(Integer, primary_key=True, index=True)
    leader_id = Column(String(64), ForeignKey("profile.id"), nullable=False, index=True)
    learner_id = Column(String(64), ForeignKey("profile.id"), nullable=True, index=True)
    invite_code = Column(String(12), nullable=False, unique=True, index=True)
    status = Column(String(20), nullable=False, default="pending")
    current_week = Column(Integer, nullable=False, default=1)
    covenant_accepted_leader = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    covenant_accepted_learner = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    started_at = Column(DateTime, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc_naive)


__all__ = ["PairingModel"]
