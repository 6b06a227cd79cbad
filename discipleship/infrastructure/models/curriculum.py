"""SQLAlchemy models for the curriculum catalog."""

from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from discipleship.infrastructure.database import Base


class WeeklyContentModel(Base):
    __tablename__ = "weekly_content"

    id = Column(Integer, primary_key=True, index=True)
    week_number = Column(Integer, nullable=False, unique=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    scripture_reference = Column(String(200), nullable=True)
    video_url = Column(String(500), nullable=True)


class AssignmentModel(Base):
    __tablename__ = "assignment"
    __table_args__ = (
        UniqueConstraint("week_number", "order_index", name="uq_assignment_week_order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    week_number = Column(Integer, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    assignment_type = Column(String(20), nullable=False)
    order_index = Column(Integer, nullable=False, default=0)


__all__ = ["AssignmentModel", "WeeklyContentModel"]
