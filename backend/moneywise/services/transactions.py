from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from .. import models
from ..schemas.insights import TransactionIn
from .records import select_all_by_owner


async def load_transactions(db: AsyncSession, user_id: str) -> List[TransactionIn]:
    """The user's stored transactions, newest first, as engine input."""
    rows = await select_all_by_owner(db, models.Transaction, user_id, order_by="date")
    return [TransactionIn.model_validate(row) for row in rows]
