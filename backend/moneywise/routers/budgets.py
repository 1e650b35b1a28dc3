from datetime import date
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from ..database import get_db
from .. import models, schemas, services

router = APIRouter(prefix="/users/{user_id}/budgets", tags=["Budgets"])


@router.get("/", response_model=List[schemas.BudgetWithProgress])
async def get_budgets(user_id: str, db: AsyncSession = Depends(get_db)):
    """All budgets with spend for their current period."""
    budgets = await services.select_all_by_owner(db, models.Budget, user_id, order_by="created_at")
    transactions = await services.load_transactions(db, user_id)
    today = date.today()

    return [
        schemas.BudgetWithProgress(
            **schemas.BudgetOut.model_validate(budget).model_dump(),
            **services.budget_progress(budget, transactions, today)
        )
        for budget in budgets
    ]


@router.post("/", response_model=schemas.BudgetOut)
async def create_budget(user_id: str, data: schemas.BudgetCreate, db: AsyncSession = Depends(get_db)):
    return await services.insert(db, models.Budget, user_id, data.model_dump())


@router.put("/{budget_id}", response_model=schemas.BudgetOut)
async def update_budget(
    user_id: str,
    budget_id: str,
    data: schemas.BudgetUpdate,
    db: AsyncSession = Depends(get_db)
):
    budget = await services.update_by_id(db, models.Budget, user_id, budget_id, data.model_dump(exclude_unset=True))
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return budget


@router.delete("/{budget_id}")
async def delete_budget(user_id: str, budget_id: str, db: AsyncSession = Depends(get_db)):
    if not await services.delete_by_id(db, models.Budget, user_id, budget_id):
        raise HTTPException(status_code=404, detail="Budget not found")
    return {"message": "Budget deleted successfully"}
