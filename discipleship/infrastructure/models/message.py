"""SQLAlchemy model for pairing messages."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from discipleship.infrastructure.database import Base
from discipleship.utils import now_utc_naive


class MessageModel(Base):
    __tablename__ = "message"

    id = Column(Integer, primary_key=True, index=True)
    pairing_id = Column(Integer, ForeignKey("pairing.id"), nullable=False, index=True)
    sender_id = Column(String(64), ForeignKey("profile.id"), nullable=False)
    content = Column(Text, nullable=False)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive, index=True)


__all__ = ["MessageModel"]
