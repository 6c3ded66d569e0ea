from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from weekly_goals.core.constants import DEFAULT_HISTORY_WEEKS
from weekly_goals.core.week_utils import get_week_boundaries
from weekly_goals.db import get_db
from weekly_goals.schemas.progress import ProgressSummary, ProgressUpdate, WeeklyProgressRead
from weekly_goals.services import progress as progress_service


router = APIRouter(prefix="/goals/{goal_id}/progress", tags=["progress"])


@router.put("", response_model=WeeklyProgressRead)
def upsert_current_progress(
    goal_id: str,
    payload: ProgressUpdate,
    db: Session = Depends(get_db),
):
    """Set this week's value (measurable) or completed flag (yes/no)."""
    return progress_service.record_progress(
        db,
        goal_id,
        get_week_boundaries(),
        value=payload.value,
        completed=payload.completed,
    )


@router.get("/current", response_model=Optional[WeeklyProgressRead])
def get_current_progress(goal_id: str, db: Session = Depends(get_db)):
    # null when nothing recorded this week (storage is sparse)
    return progress_service.get_current_progress(db, goal_id)


@router.get("/history", response_model=list[WeeklyProgressRead])
def get_progress_history(
    goal_id: str,
    weeks: int = Query(DEFAULT_HISTORY_WEEKS),
    db: Session = Depends(get_db),
):
    """
    Progress for the last `weeks` weeks (including the current week).

    - Weeks are Monday–Sunday.
    - Weeks without a record appear with value 0 / completed false and a null id.
    """
    return progress_service.get_history(db, goal_id, weeks)


@router.get("/summary", response_model=ProgressSummary)
def get_progress_summary(
    goal_id: str,
    weeks: int = Query(DEFAULT_HISTORY_WEEKS),
    db: Session = Depends(get_db),
):
    return progress_service.summarize_history(db, goal_id, weeks)
