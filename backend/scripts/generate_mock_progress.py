#!/usr/bin/env python3
"""
Fill the last N weeks of every goal with plausible progress.

Weeks that already have a record are left alone, so the script can be run
repeatedly. Per goal type:
  - Measurable (with a target):
      70% of weeks: 90-110% of target
      20% of weeks: 50-90% of target
      10% of weeks: 0-50% of target
  - Yes/no: completed 70% of the time

Usage (from backend/):
  python scripts/generate_mock_progress.py --weeks 10
  python scripts/generate_mock_progress.py --weeks 16 --seed 42
"""

import argparse
import random
from typing import Optional

from weekly_goals.core.week_utils import get_last_n_weeks
from weekly_goals.db import Base, SessionLocal, engine
from weekly_goals.models.goal import Goal, GoalType
from weekly_goals.models.weekly_progress import WeeklyProgress
from weekly_goals.services.progress import record_progress


def mock_value(target: float, rng: random.Random) -> float:
    """Value around `target`, rounded to 1 decimal."""
    roll = rng.random()
    if roll < 0.7:
        value = target * (0.9 + rng.random() * 0.2)
    elif roll < 0.9:
        value = target * (0.5 + rng.random() * 0.4)
    else:
        value = target * (rng.random() * 0.5)
    return round(value, 1)


def mock_reading(goal: Goal, rng: random.Random) -> Optional[dict]:
    """Keyword args for record_progress, or None when the goal can't be mocked."""
    if goal.goal_type is GoalType.YES_NO:
        return {"completed": rng.random() < 0.7}
    if goal.target:
        return {"value": mock_value(goal.target, rng)}
    return None


def generate_mock_progress(db, weeks: int = 10, rng: Optional[random.Random] = None) -> int:
    """Create missing weekly records for every goal. Returns how many were created."""
    rng = rng or random.Random()
    boundaries = get_last_n_weeks(weeks)

    goals = db.query(Goal).order_by(Goal.created_at).all()
    if not goals:
        print("No goals found. Create some goals first!")
        return 0

    print(f"Found {len(goals)} goal(s)\n")
    total = 0

    for goal in goals:
        print(f"{goal.icon} {goal.title} ({goal.type})")

        existing = {
            row.week_start
            for row in db.query(WeeklyProgress.week_start).filter(WeeklyProgress.goal_id == goal.id)
        }
        created = 0

        for week in boundaries:
            if week.week_start in existing:
                print(f"   skipping {week.week_start.date().isoformat()} (already exists)")
                continue

            reading = mock_reading(goal, rng)
            if reading is None:
                print("   no target set, skipping")
                break

            record_progress(db, goal.id, week, **reading)
            created += 1

        print(f"   created {created} week(s) of progress\n")
        total += created

    return total


def main() -> None:
    ap = argparse.ArgumentParser(description="Generate mock weekly progress for existing goals")
    ap.add_argument("--weeks", type=int, default=10, help="How many weeks back to fill, including the current week")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    args = ap.parse_args()

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        total = generate_mock_progress(db, weeks=args.weeks, rng=random.Random(args.seed))
    finally:
        db.close()

    print(f"Done! Generated {total} progress record(s).")


if __name__ == "__main__":
    main()
