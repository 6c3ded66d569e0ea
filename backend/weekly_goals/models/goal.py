import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, String
from sqlalchemy.orm import relationship
from weekly_goals.db import Base


class GoalType(str, enum.Enum):
    MEASURABLE = "MEASURABLE"  # numeric value against target/unit
    YES_NO = "YES_NO"          # completed or not


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Goal(Base):
    __tablename__ = "goals"

    id = Column(String(36), primary_key=True, default=new_id)

    title = Column(String, nullable=False)

    # GoalType value; decides which progress field is relevant
    type = Column(String(20), nullable=False)

    # Measurable goals only
    target = Column(Float, nullable=True)
    unit = Column(String, nullable=True)

    icon = Column(String, nullable=False)

    # Timestamps (set client-side so creation order survives same-second inserts)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    progress = relationship(
        "WeeklyProgress",
        back_populates="goal",
        cascade="all, delete-orphan",
        order_by="WeeklyProgress.week_start",
    )

    @property
    def goal_type(self) -> GoalType:
        return GoalType(self.type)
