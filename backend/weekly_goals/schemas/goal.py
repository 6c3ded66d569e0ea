from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from weekly_goals.models.goal import GoalType

# Blank or whitespace-only titles are rejected
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class GoalBase(BaseModel):
    title: Title
    type: GoalType
    # Measurable goals: e.g. target=10, unit="km"
    target: Optional[float] = None
    unit: Optional[str] = None
    icon: Optional[str] = None


class GoalCreate(GoalBase):
    """Schema for creating a new goal."""

    # Be lenient with extra fields from clients
    model_config = ConfigDict(extra="ignore")


class GoalUpdate(BaseModel):
    """Schema for updating an existing goal (all fields optional)."""

    title: Optional[Title] = None
    type: Optional[GoalType] = None
    target: Optional[float] = None
    unit: Optional[str] = None
    icon: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class GoalRead(GoalBase):
    """Schema returned to the frontend when reading a goal."""

    id: str
    icon: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)
