"""SQLAlchemy model for per-user assignment progress."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)

from discipleship.infrastructure.database import Base
from discipleship.utils import now_utc_naive


class AssignmentProgressModel(Base):
    """At most one row per (pairing, assignment, user) triple."""

    __tablename__ = "assignment_progress"
    __table_args__ = (
        UniqueConstraint(
            "pairing_id",
            "assignment_id",
            "user_id",
            name="uq_assignment_progress_pairing_assignment_user",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    pairing_id = Column(Integer, ForeignKey("pairing.id"), nullable=False, index=True)
    assignment_id = Column(Integer, ForeignKey("assignment.id"), nullable=False)
    user_id = Column(String(64), ForeignKey("profile.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="not_started")
    notes = Column(Text, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc_naive)


__all__ = ["AssignmentProgressModel"]
