from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from weekly_goals.core.errors import InvalidInputError
from weekly_goals.models.goal import GoalType


class ProgressUpdate(BaseModel):
    """Body of PUT /goals/{goal_id}/progress. Which field is required depends on the goal."""

    value: Optional[float] = Field(default=None, strict=True, allow_inf_nan=False)
    completed: Optional[bool] = Field(default=None, strict=True)

    model_config = ConfigDict(extra="ignore")


class MeasurableReading(BaseModel):
    kind: Literal[GoalType.MEASURABLE] = GoalType.MEASURABLE
    value: float

    def columns(self) -> dict:
        return {"value": self.value, "completed": None}


class YesNoReading(BaseModel):
    kind: Literal[GoalType.YES_NO] = GoalType.YES_NO
    completed: bool

    def columns(self) -> dict:
        return {"value": None, "completed": self.completed}


# A week's progress is either a number or a yes/no, never both
ProgressReading = Union[MeasurableReading, YesNoReading]


def reading_for(
    goal_type: GoalType,
    value: Optional[float] = None,
    completed: Optional[bool] = None,
) -> ProgressReading:
    """Pick the field that matters for `goal_type`; the other one is dropped."""
    if goal_type is GoalType.MEASURABLE:
        if value is None:
            raise InvalidInputError("Value required for measurable goals")
        return MeasurableReading(value=value)

    if completed is None:
        raise InvalidInputError("Completed status required for yes/no goals")
    return YesNoReading(completed=completed)


class WeeklyProgressRead(BaseModel):
    """A stored week, or a placeholder (id/timestamps None) for a week without data."""

    id: Optional[str] = None
    goal_id: str = Field(serialization_alias="goalId")
    week_start: datetime = Field(serialization_alias="weekStart")
    week_end: datetime = Field(serialization_alias="weekEnd")
    value: Optional[float] = None
    completed: Optional[bool] = None
    created_at: Optional[datetime] = Field(default=None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_placeholder(self) -> bool:
        return self.id is None


class ProgressSummary(BaseModel):
    """Simple averages over a goal's dense history."""

    goal_id: str = Field(serialization_alias="goalId")
    type: GoalType
    weeks: int
    weeks_recorded: int = Field(serialization_alias="weeksRecorded")

    # Measurable goals
    average_value: Optional[float] = Field(default=None, serialization_alias="averageValue")
    weeks_on_target: Optional[int] = Field(default=None, serialization_alias="weeksOnTarget")

    # Yes/no goals
    weeks_completed: Optional[int] = Field(default=None, serialization_alias="weeksCompleted")
    completion_rate: Optional[int] = Field(default=None, serialization_alias="completionRate")

    current_week_complete: bool = Field(serialization_alias="currentWeekComplete")
