"""Whole-account operations: data export and account deletion."""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from .. import models
from ..schemas.accounts import UserExport
from ..schemas.budgets import BudgetOut
from ..schemas.goals import GoalOut
from ..schemas.transactions import TransactionOut
from .records import delete_all_by_owner, select_all_by_owner

logger = logging.getLogger(__name__)

# Tables covered by export and deletion: name -> (model, output schema)
ACCOUNT_TABLES = {
    "transactions": (models.Transaction, TransactionOut),
    "budgets": (models.Budget, BudgetOut),
    "goals": (models.Goal, GoalOut),
}


async def export_user_data(db: AsyncSession, user_id: str, now: Optional[datetime] = None) -> UserExport:
    records = {}
    for name, (model, schema) in ACCOUNT_TABLES.items():
        rows = await select_all_by_owner(db, model, user_id, order_by="created_at", descending=False)
        records[name] = [schema.model_validate(row) for row in rows]

    return UserExport(**records, export_date=now or datetime.now(timezone.utc))


async def delete_user_data(db: AsyncSession, user_id: str) -> Dict[str, int]:
    """Removes the user's transactions, budgets and goals. Returns rows removed per table."""
    deleted = {}
    for name, (model, _) in ACCOUNT_TABLES.items():
        deleted[name] = await delete_all_by_owner(db, model, user_id)
    logger.info(f"[ACCOUNT] Deleted data for {user_id}: {deleted}")
    return deleted
