from pydantic import BaseModel
from typing import List


class PeriodTotals(BaseModel):
    income: float
    expenses: float
    net: float


class MonthComparison(BaseModel):
    current_month: PeriodTotals
    last_month: PeriodTotals
    income_change_percent: float  # 0 when last month had no income
    expense_change_percent: float


class CategorySlice(BaseModel):
    name: str
    value: float


class MonthlyTrendItem(BaseModel):
    month: str  # "Jan 2024"
    income: float
    expenses: float
    net: float


class DailySpendItem(BaseModel):
    date: str  # "Jan 05"
    expenses: float


class AnalyticsOverview(BaseModel):
    comparison: MonthComparison
    category_breakdown: List[CategorySlice]
    monthly_trends: List[MonthlyTrendItem]
    daily_spending: List[DailySpendItem]


class DailyFlowItem(BaseModel):
    date: str  # "Jan 05"
    income: float
    expenses: float


class DashboardSummary(BaseModel):
    monthly_income: float
    monthly_expenses: float
    monthly_balance: float
    last_7_days: List[DailyFlowItem]
