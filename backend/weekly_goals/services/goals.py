"""Goal registry: create/read/update/delete over goal definitions."""

import logging

from sqlalchemy.orm import Session

from weekly_goals.core.constants import DEFAULT_ICON
from weekly_goals.core.errors import InvalidInputError, NotFoundError
from weekly_goals.db import transaction
from weekly_goals.models.goal import Goal, GoalType
from weekly_goals.schemas.goal import GoalCreate, GoalUpdate

logger = logging.getLogger(__name__)


def _validate_target(target) -> None:
    if target is not None and target <= 0:
        raise InvalidInputError("target must be > 0")


def _normalize_for_type(goal: Goal) -> None:
    # Yes/no goals have nothing to measure against
    if goal.type == GoalType.YES_NO.value:
        goal.target = None
        goal.unit = None


def list_goals(db: Session) -> list[Goal]:
    return db.query(Goal).order_by(Goal.created_at.asc()).all()


def get_goal(db: Session, goal_id: str) -> Goal:
    goal = db.query(Goal).filter(Goal.id == goal_id).first()
    if not goal:
        raise NotFoundError("Goal not found")
    return goal


def create_goal(db: Session, payload: GoalCreate) -> Goal:
    _validate_target(payload.target)

    goal = Goal(
        title=payload.title,
        type=payload.type.value,
        target=payload.target,
        unit=payload.unit,
        icon=payload.icon or DEFAULT_ICON,
    )
    _normalize_for_type(goal)

    with transaction(db, "create goal"):
        db.add(goal)
    db.refresh(goal)

    logger.info("Created %s goal %s (%r)", goal.type, goal.id, goal.title)
    return goal


def update_goal(db: Session, goal_id: str, payload: GoalUpdate) -> Goal:
    goal = get_goal(db, goal_id)

    update_data = payload.model_dump(exclude_unset=True)

    for required in ("title", "type"):
        if required in update_data and update_data[required] is None:
            raise InvalidInputError(f"{required} cannot be null")
    if "target" in update_data:
        _validate_target(update_data["target"])
    if "type" in update_data:
        update_data["type"] = update_data["type"].value
    if "icon" in update_data and not update_data["icon"]:
        update_data["icon"] = DEFAULT_ICON

    with transaction(db, "update goal"):
        for key, value in update_data.items():
            setattr(goal, key, value)
        _normalize_for_type(goal)
    db.refresh(goal)

    logger.info("Updated goal %s fields=%s", goal.id, sorted(update_data))
    return goal


def delete_goal(db: Session, goal_id: str) -> None:
    """Delete the goal; its weekly progress goes with it."""
    goal = get_goal(db, goal_id)

    with transaction(db, "delete goal"):
        db.delete(goal)

    logger.info("Deleted goal %s", goal_id)
