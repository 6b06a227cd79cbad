"""SQLAlchemy model for weekly reflections."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from discipleship.infrastructure.database import Base
from discipleship.utils import now_utc_naive


class ReflectionModel(Base):
    __tablename__ = "reflection"

    id = Column(Integer, primary_key=True, index=True)
    pairing_id = Column(Integer, ForeignKey("pairing.id"), nullable=False, index=True)
    user_id = Column(String(64), ForeignKey("profile.id"), nullable=False)
    week_number = Column(Integer, nullable=False)
    reflection_text = Column(Text, nullable=False)
    is_shared = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc_naive)


__all__ = ["ReflectionModel"]
