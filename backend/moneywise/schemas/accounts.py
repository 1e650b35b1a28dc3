from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .budgets import BudgetOut
from .goals import GoalOut
from .transactions import TransactionOut


class UserExport(BaseModel):
    """Everything a user owns, as a single downloadable document."""
    transactions: List[TransactionOut]
    budgets: List[BudgetOut]
    goals: List[GoalOut]
    export_date: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountDeletion(BaseModel):
    message: str
    deleted: Dict[str, int]  # table name -> rows removed
