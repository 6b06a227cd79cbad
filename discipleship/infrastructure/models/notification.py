"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from discipleship.infrastructure.database import Base
from discipleship.utils import now_utc_naive


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), ForeignKey("profile.id"), nullable=False, index=True)
    pairing_id = Column(Integer, ForeignKey("pairing.id"), nullable=True)
    type = Column(String(30), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)


__all__ = ["NotificationModel"]
