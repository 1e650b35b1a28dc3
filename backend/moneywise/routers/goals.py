from datetime import date
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ..database import get_db
from .. import models, schemas, services

router = APIRouter(prefix="/users/{user_id}/goals", tags=["Goals"])


def _with_progress(goal: models.Goal, today: date) -> schemas.GoalWithProgress:
    return schemas.GoalWithProgress(
        **schemas.GoalOut.model_validate(goal).model_dump(),
        **services.goal_progress(goal, today)
    )


@router.get("/", response_model=List[schemas.GoalWithProgress])
async def get_goals(user_id: str, db: AsyncSession = Depends(get_db)):
    """All goals with their current progress."""
    goals = await services.select_all_by_owner(db, models.Goal, user_id, order_by="created_at")
    today = date.today()
    return [_with_progress(goal, today) for goal in goals]


@router.post("/", response_model=schemas.GoalOut)
async def create_goal(user_id: str, data: schemas.GoalCreate, db: AsyncSession = Depends(get_db)):
    return await services.insert(db, models.Goal, user_id, data.model_dump())


@router.put("/{goal_id}", response_model=schemas.GoalOut)
async def update_goal(
    user_id: str,
    goal_id: str,
    data: schemas.GoalUpdate,
    db: AsyncSession = Depends(get_db)
):
    goal = await services.update_by_id(db, models.Goal, user_id, goal_id, data.model_dump(exclude_unset=True))
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


@router.post("/{goal_id}/progress", response_model=schemas.GoalWithProgress)
async def update_goal_progress(
    user_id: str,
    goal_id: str,
    data: schemas.GoalProgressUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Set how much has been saved towards a goal so far."""
    goal = await services.update_by_id(db, models.Goal, user_id, goal_id, {"current_amount": data.current_amount})
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return _with_progress(goal, date.today())


@router.delete("/{goal_id}")
async def delete_goal(user_id: str, goal_id: str, db: AsyncSession = Depends(get_db)):
    if not await services.delete_by_id(db, models.Goal, user_id, goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"message": "Goal deleted successfully"}
