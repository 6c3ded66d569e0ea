import pytest
from pydantic import ValidationError

from weekly_goals.core.constants import DEFAULT_ICON
from weekly_goals.core.errors import InvalidInputError, NotFoundError
from weekly_goals.models.goal import GoalType
from weekly_goals.schemas.goal import GoalCreate, GoalUpdate
from weekly_goals.services.goals import (
    create_goal,
    delete_goal,
    get_goal,
    list_goals,
    update_goal,
)


def test_create_defaults_icon(db):
    goal = create_goal(db, GoalCreate(title="Read", type=GoalType.MEASURABLE, target=3, unit="books"))
    assert goal.icon == DEFAULT_ICON
    assert goal.id
    assert goal.created_at is not None


def test_yes_no_goal_drops_target_and_unit(db):
    goal = create_goal(db, GoalCreate(title="Call mom", type=GoalType.YES_NO, target=1, unit="calls"))
    assert goal.target is None
    assert goal.unit is None


def test_target_must_be_positive(db):
    with pytest.raises(InvalidInputError):
        create_goal(db, GoalCreate(title="Swim", type=GoalType.MEASURABLE, target=0))


def test_list_in_creation_order(db):
    for title in ("a", "b", "c"):
        create_goal(db, GoalCreate(title=title, type=GoalType.YES_NO))
    assert [g.title for g in list_goals(db)] == ["a", "b", "c"]


def test_update_only_changes_supplied_fields(db):
    goal = create_goal(db, GoalCreate(title="Run", type=GoalType.MEASURABLE, target=10, unit="km", icon="🏃"))

    updated = update_goal(db, goal.id, GoalUpdate(target=12))

    assert updated.target == 12
    assert updated.title == "Run"
    assert updated.unit == "km"
    assert updated.icon == "🏃"


def test_update_rejects_null_title(db):
    goal = create_goal(db, GoalCreate(title="Run", type=GoalType.YES_NO))
    with pytest.raises(InvalidInputError):
        update_goal(db, goal.id, GoalUpdate(title=None))


def test_switching_to_yes_no_clears_target(db):
    goal = create_goal(db, GoalCreate(title="Stretch", type=GoalType.MEASURABLE, target=5, unit="min"))
    updated = update_goal(db, goal.id, GoalUpdate(type=GoalType.YES_NO))
    assert updated.type == "YES_NO"
    assert updated.target is None and updated.unit is None


def test_missing_goal(db):
    with pytest.raises(NotFoundError):
        get_goal(db, "nope")
    with pytest.raises(NotFoundError):
        update_goal(db, "nope", GoalUpdate(title="x"))
    with pytest.raises(NotFoundError):
        delete_goal(db, "nope")


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_blank_title_rejected(title):
    with pytest.raises(ValidationError):
        GoalCreate(title=title, type=GoalType.YES_NO)
    with pytest.raises(ValidationError):
        GoalUpdate(title=title)


def test_title_is_stripped(db):
    goal = create_goal(db, GoalCreate(title="  Read  ", type=GoalType.YES_NO))
    assert goal.title == "Read"
