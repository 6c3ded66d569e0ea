from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship
from weekly_goals.db import Base
from weekly_goals.models.goal import new_id, utcnow


class WeeklyProgress(Base):
    __tablename__ = "weekly_progress"

    id = Column(String(36), primary_key=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)

    # Monday 00:00:00.000 local -> Sunday 23:59:59.999 local
    week_start = Column(DateTime, nullable=False)
    week_end = Column(DateTime, nullable=False)

    # Exactly one of these is set, matching the goal's type
    value = Column(Float, nullable=True)
    completed = Column(Boolean, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    goal = relationship("Goal", back_populates="progress")

    # One record per goal per week; the upsert conflicts on this
    __table_args__ = (
        UniqueConstraint("goal_id", "week_start", name="uq_weekly_progress_goal_week"),
    )
