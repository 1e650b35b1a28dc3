from enum import Enum
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
from datetime import datetime


class BudgetPeriod(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def _non_negative(v: Optional[float]) -> Optional[float]:
    if v is not None and v < 0:
        raise ValueError('amount must be >= 0')
    return v


class BudgetBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True, allow_inf_nan=False)

    category: str
    amount: float
    period: BudgetPeriod = BudgetPeriod.MONTHLY.value

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v: float) -> float:
        return _non_negative(v)


class BudgetCreate(BudgetBase):
    pass


class BudgetUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True, allow_inf_nan=False)

    category: Optional[str] = None
    amount: Optional[float] = None
    period: Optional[BudgetPeriod] = None

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v: Optional[float]) -> Optional[float]:
        return _non_negative(v)


class BudgetOut(BudgetBase):
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)


class BudgetWithProgress(BudgetOut):
    spent: float = 0.0
    remaining: float = 0.0
    percent_used: float = 0.0
    is_over_budget: bool = False
