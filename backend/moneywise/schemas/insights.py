"""Schemas for the insight engine and its request/response boundary."""

from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Timeframe(str, Enum):
    """Reporting window label. Only used in insight wording."""
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class InsightType(str, Enum):
    SPENDING_PATTERN = "spending_pattern"
    BUDGET_ALERT = "budget_alert"
    SAVING_TIP = "saving_tip"
    GOAL_PROGRESS = "goal_progress"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TransactionIn(BaseModel):
    id: str
    amount: float
    description: str = ""
    category: str
    type: TransactionType
    date: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v) if isinstance(v, int) else v

    @field_validator("date", mode="before")
    @classmethod
    def promote_date(cls, v):
        # Bare dates ("2024-01-31") become midnight of that day
        if isinstance(v, datetime):
            return v
        if isinstance(v, date):
            return datetime.combine(v, datetime.min.time())
        if isinstance(v, str) and len(v) == 10:
            return datetime.combine(date.fromisoformat(v), datetime.min.time())
        return v

    @property
    def day(self) -> str:
        """ISO date of the transaction in its own offset."""
        return self.date.date().isoformat()


class AggregateMetrics(BaseModel):
    total_income: float = 0.0
    total_expenses: float = 0.0
    net_income: float = 0.0
    expenses_by_category: Dict[str, float] = {}
    top_expense_category: Optional[Tuple[str, float]] = None
    daily_expense_totals: Dict[str, float] = {}
    average_daily_expense: Optional[float] = None  # None when no expense days
    recent_average_expense: Optional[float] = None


class Insight(BaseModel):
    type: InsightType
    title: str
    description: str
    severity: Severity
    action_suggested: Optional[str] = None


class InsightSummary(BaseModel):
    total_income: float
    total_expenses: float
    net_income: float
    top_expense_category: Optional[str] = None
    savings_rate: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsightRequest(BaseModel):
    transactions: List[TransactionIn]
    timeframe: Timeframe


class InsightResponse(BaseModel):
    insights: List[Insight] = Field(default_factory=list)
    summary: InsightSummary
