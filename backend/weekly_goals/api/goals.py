from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from weekly_goals.db import get_db
from weekly_goals.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from weekly_goals.services import goals as goal_service


router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("", response_model=list[GoalRead])
def list_goals(db: Session = Depends(get_db)):
    """All goals, oldest first (the order cards appear on the home page)."""
    return goal_service.list_goals(db)


@router.get("/{goal_id}", response_model=GoalRead)
def get_goal(goal_id: str, db: Session = Depends(get_db)):
    return goal_service.get_goal(db, goal_id)


@router.post("", response_model=GoalRead, status_code=201)
def create_goal(payload: GoalCreate, db: Session = Depends(get_db)):
    return goal_service.create_goal(db, payload)


@router.put("/{goal_id}", response_model=GoalRead)
def update_goal(goal_id: str, payload: GoalUpdate, db: Session = Depends(get_db)):
    # Only fields present in the body change
    return goal_service.update_goal(db, goal_id, payload)


@router.delete("/{goal_id}", status_code=204)
def delete_goal(goal_id: str, db: Session = Depends(get_db)):
    goal_service.delete_goal(db, goal_id)
    return Response(status_code=204)
