from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from .. import services, schemas

router = APIRouter(prefix="/users/{user_id}/analytics", tags=["Analytics"])


@router.get("/", response_model=Optional[schemas.AnalyticsOverview])
async def get_analytics(user_id: str, db: AsyncSession = Depends(get_db)):
    """
    Dashboard analytics:
    - Current vs last month income/expenses with % change
    - Top expense categories
    - Six month income/expense trend
    - Daily spending for the last 30 days

    Returns null when the user has no transactions.
    """
    transactions = await services.load_transactions(db, user_id)
    return services.build_analytics(transactions)


@router.get("/dashboard", response_model=schemas.DashboardSummary)
async def get_dashboard(user_id: str, db: AsyncSession = Depends(get_db)):
    """Current month income, expenses and balance with a seven day income/expense series."""
    transactions = await services.load_transactions(db, user_id)
    return services.dashboard_summary(transactions)
