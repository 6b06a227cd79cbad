"""SQLAlchemy model for participant profiles."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.sql import expression

from discipleship.infrastructure.database import Base
from discipleship.utils import now_utc_naive


class ProfileModel(Base):
    """Database representation of a profile, keyed by the identity subject."""

    __tablename__ = "profile"

    id = Column(String(64), primary_key=True)
    email = Column(String(255), nullable=True, index=True)
    full_name = Column(String(120), nullable=True)
    role = Column(String(20), nullable=True)
    bio = Column(Text, nullable=True)
    phone = Column(String(40), nullable=True)
    avatar_url = Column(String(500), nullable=True)
    onboarding_complete = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    email_notifications = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    message_notifications = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    progress_notifications = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True, onupdate=now_utc_naive)


__all__ = ["ProfileModel"]
