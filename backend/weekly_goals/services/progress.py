"""
Weekly progress: one sparse row per (goal, week), served back densely.

Storage only ever holds weeks somebody recorded. Reads that feed charts
(`get_history`, `summarize_history`) fill the gaps with 0 / False so the
frontend never has to special-case a missing week.
"""

import logging
import math
from datetime import datetime
from typing import Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from weekly_goals.core.constants import MAX_HISTORY_WEEKS, MIN_HISTORY_WEEKS
from weekly_goals.core.errors import InvalidInputError, StoreFailure
from weekly_goals.core.week_utils import WeekBoundary, get_last_n_weeks, get_week_boundaries
from weekly_goals.db import transaction
from weekly_goals.models.goal import Goal, GoalType, utcnow
from weekly_goals.models.weekly_progress import WeeklyProgress
from weekly_goals.schemas.progress import (
    ProgressReading,
    ProgressSummary,
    WeeklyProgressRead,
    reading_for,
)
from weekly_goals.services.goals import get_goal

logger = logging.getLogger(__name__)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _upsert_statement(db: Session, goal_id: str, week: WeekBoundary, reading: ProgressReading):
    dialect = db.get_bind().dialect.name
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        logger.error("Progress upsert is not supported on %s", dialect)
        raise StoreFailure(f"Progress upsert is not supported on {dialect}")

    columns = reading.columns()
    stmt = insert(WeeklyProgress).values(
        goal_id=goal_id,
        week_start=week.week_start,
        week_end=week.week_end,
        **columns,
    )
    # Same week again: overwrite the reading, keep id/created_at/week_end
    return stmt.on_conflict_do_update(
        index_elements=["goal_id", "week_start"],
        set_={**columns, "updated_at": utcnow()},
    )


def _find_week(db: Session, goal_id: str, week_start: datetime) -> Optional[WeeklyProgress]:
    return (
        db.query(WeeklyProgress)
        .filter(WeeklyProgress.goal_id == goal_id)
        .filter(WeeklyProgress.week_start == week_start)
        .first()
    )


def record_progress(
    db: Session,
    goal_id: str,
    week: WeekBoundary,
    value: Optional[float] = None,
    completed: Optional[bool] = None,
) -> WeeklyProgress:
    """
    Insert or overwrite the goal's record for `week`.

    Measurable goals need `value`, yes/no goals need `completed`; the field
    that does not apply is stored as NULL whatever the caller sent.
    """
    goal = get_goal(db, goal_id)
    reading = reading_for(goal.goal_type, value=value, completed=completed)

    # Single INSERT .. ON CONFLICT so two writers for one week cannot both insert
    with transaction(db, "update progress"):
        db.execute(_upsert_statement(db, goal.id, week, reading))

    row = _find_week(db, goal.id, week.week_start)
    logger.info(
        "Recorded progress for goal %s week %s: %s",
        goal.id,
        week.week_start.date().isoformat(),
        reading.columns(),
    )
    return row


def get_current_progress(
    db: Session, goal_id: str, now: Optional[datetime] = None
) -> Optional[WeeklyProgress]:
    """This week's record, or None when nothing has been recorded yet."""
    week_start, _ = get_week_boundaries(now)
    return _find_week(db, goal_id, week_start)


def _placeholder(goal: Goal, week: WeekBoundary) -> WeeklyProgressRead:
    measurable = goal.goal_type is GoalType.MEASURABLE
    return WeeklyProgressRead(
        id=None,
        goal_id=goal.id,
        week_start=week.week_start,
        week_end=week.week_end,
        value=0.0 if measurable else None,
        completed=None if measurable else False,
        created_at=None,
        updated_at=None,
    )


def _round_half_up(x: float, digits: int = 0) -> float:
    # .5 ties go up, matching the history page's labels
    scale = 10 ** digits
    return math.floor(x * scale + 0.5) / scale


def _check_weeks(weeks: int) -> None:
    if weeks < MIN_HISTORY_WEEKS or weeks > MAX_HISTORY_WEEKS:
        raise InvalidInputError(
            f"Weeks must be between {MIN_HISTORY_WEEKS} and {MAX_HISTORY_WEEKS}"
        )


def _dense_history(
    db: Session, goal: Goal, weeks: int, now: Optional[datetime]
) -> list[WeeklyProgressRead]:
    boundaries = get_last_n_weeks(weeks, now=now)
    week_starts = [b.week_start for b in boundaries]

    rows = (
        db.query(WeeklyProgress)
        .filter(WeeklyProgress.goal_id == goal.id)
        .filter(WeeklyProgress.week_start.in_(week_starts))
        .all()
    )

    # Map from week_start -> stored row
    by_week: dict[datetime, WeeklyProgress] = {row.week_start: row for row in rows}

    history: list[WeeklyProgressRead] = []
    for week in boundaries:
        row = by_week.get(week.week_start)
        if row is not None:
            history.append(WeeklyProgressRead.model_validate(row))
        else:
            history.append(_placeholder(goal, week))

    return history


def get_history(
    db: Session, goal_id: str, weeks: int, now: Optional[datetime] = None
) -> list[WeeklyProgressRead]:
    """
    Exactly `weeks` entries, oldest first, ending with the current week.

    - Recorded weeks are returned as stored.
    - Weeks with no record become placeholders (id None, value 0 / completed False).
    """
    _check_weeks(weeks)
    goal = get_goal(db, goal_id)
    return _dense_history(db, goal, weeks, now)


def summarize_history(
    db: Session, goal_id: str, weeks: int, now: Optional[datetime] = None
) -> ProgressSummary:
    """Averages and completion counts over the same dense series `get_history` returns."""
    _check_weeks(weeks)
    goal = get_goal(db, goal_id)
    history = _dense_history(db, goal, weeks, now)
    current = history[-1]

    summary = {
        "goal_id": goal.id,
        "type": goal.goal_type,
        "weeks": len(history),
        "weeks_recorded": sum(1 for entry in history if not entry.is_placeholder),
    }

    if goal.goal_type is GoalType.MEASURABLE:
        values = [entry.value or 0.0 for entry in history]
        summary["average_value"] = _round_half_up(sum(values) / len(values), 1)
        if goal.target is not None:
            summary["weeks_on_target"] = sum(1 for v in values if v >= goal.target)
            summary["current_week_complete"] = (current.value or 0.0) >= goal.target
        else:
            summary["current_week_complete"] = False
    else:
        done = sum(1 for entry in history if entry.completed)
        summary["weeks_completed"] = done
        summary["completion_rate"] = int(_round_half_up(done / len(history) * 100))
        summary["current_week_complete"] = bool(current.completed)

    return ProgressSummary(**summary)
