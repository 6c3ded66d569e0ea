import random

from scripts.generate_mock_progress import generate_mock_progress, mock_value
from weekly_goals.models.goal import GoalType
from weekly_goals.models.weekly_progress import WeeklyProgress
from weekly_goals.schemas.goal import GoalCreate
from weekly_goals.services.goals import create_goal


def test_mock_value_stays_near_target():
    rng = random.Random(7)
    values = [mock_value(10, rng) for _ in range(200)]
    assert all(0 <= v <= 11 for v in values)
    assert all(round(v, 1) == v for v in values)


def test_fills_missing_weeks_once(db):
    run = create_goal(db, GoalCreate(title="Run", type=GoalType.MEASURABLE, target=10, unit="km"))
    create_goal(db, GoalCreate(title="Meditate", type=GoalType.YES_NO))
    create_goal(db, GoalCreate(title="No target", type=GoalType.MEASURABLE))

    created = generate_mock_progress(db, weeks=4, rng=random.Random(1))
    assert created == 8

    rows = db.query(WeeklyProgress).filter(WeeklyProgress.goal_id == run.id).all()
    assert len(rows) == 4
    assert all(r.value is not None and r.completed is None for r in rows)

    # second run only skips
    assert generate_mock_progress(db, weeks=4, rng=random.Random(1)) == 0


def test_no_goals(db):
    assert generate_mock_progress(db, weeks=3) == 0
