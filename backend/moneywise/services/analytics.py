from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from ..schemas import analytics as analytics_schemas
from ..schemas.insights import TransactionIn, TransactionType
from .periods import month_start

# ==========================================
# 1. HELPERS
# ==========================================

def _totals(transactions: Sequence[TransactionIn]) -> Tuple[float, float]:
    """Returns (income, expenses)."""
    income = 0.0
    expenses = 0.0
    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            income += txn.amount
        elif txn.type == TransactionType.EXPENSE:
            expenses += txn.amount
    return income, expenses


def _in_range(transactions: Sequence[TransactionIn], start: date, end: date) -> List[TransactionIn]:
    """Transactions dated in [start, end)."""
    return [t for t in transactions if start <= t.date.date() < end]


def _change_percent(current: float, previous: float) -> float:
    if previous <= 0:
        return 0.0
    return round((current - previous) / previous * 100, 1)

# ==========================================
# 2. BUILDERS
# ==========================================

def month_over_month(transactions: Sequence[TransactionIn], today: date) -> analytics_schemas.MonthComparison:
    this_month = month_start(today.year, today.month)
    last_month = month_start(today.year, today.month - 1)

    cur_income, cur_expenses = _totals([t for t in transactions if t.date.date() >= this_month])
    prev_income, prev_expenses = _totals(_in_range(transactions, last_month, this_month))

    return analytics_schemas.MonthComparison(
        current_month=analytics_schemas.PeriodTotals(
            income=cur_income, expenses=cur_expenses, net=cur_income - cur_expenses
        ),
        last_month=analytics_schemas.PeriodTotals(
            income=prev_income, expenses=prev_expenses, net=prev_income - prev_expenses
        ),
        income_change_percent=_change_percent(cur_income, prev_income),
        expense_change_percent=_change_percent(cur_expenses, prev_expenses),
    )


def category_breakdown(transactions: Sequence[TransactionIn], limit: int = 6) -> List[analytics_schemas.CategorySlice]:
    """Largest expense categories; sorted() is stable so ties keep first-seen order."""
    by_category: Dict[str, float] = {}
    for txn in transactions:
        if txn.type == TransactionType.EXPENSE:
            by_category[txn.category] = by_category.get(txn.category, 0.0) + txn.amount

    ranked = sorted(by_category.items(), key=lambda item: item[1], reverse=True)
    return [analytics_schemas.CategorySlice(name=k, value=v) for k, v in ranked[:limit]]


def monthly_trends(
    transactions: Sequence[TransactionIn],
    today: date,
    months: int = 6
) -> List[analytics_schemas.MonthlyTrendItem]:
    """Income/expense per calendar month, oldest first, ending with the current month."""
    trends = []
    for back in range(months - 1, -1, -1):
        start = month_start(today.year, today.month - back)
        end = month_start(today.year, today.month - back + 1)
        income, expenses = _totals(_in_range(transactions, start, end))
        trends.append(analytics_schemas.MonthlyTrendItem(
            month=start.strftime("%b %Y"),
            income=income,
            expenses=expenses,
            net=income - expenses,
        ))
    return trends


def daily_spending(
    transactions: Sequence[TransactionIn],
    today: date,
    days: int = 30
) -> List[analytics_schemas.DailySpendItem]:
    """Expense total per day for the last ``days`` days including today."""
    by_day: Dict[date, float] = {}
    for txn in transactions:
        if txn.type == TransactionType.EXPENSE:
            day = txn.date.date()
            by_day[day] = by_day.get(day, 0.0) + txn.amount

    items = []
    for back in range(days - 1, -1, -1):
        day = today - timedelta(days=back)
        items.append(analytics_schemas.DailySpendItem(
            date=day.strftime("%b %d"),
            expenses=by_day.get(day, 0.0),
        ))
    return items


def daily_flow(
    transactions: Sequence[TransactionIn],
    today: date,
    days: int = 7
) -> List[analytics_schemas.DailyFlowItem]:
    """Income and expense per day for the last ``days`` days, oldest first."""
    by_day: Dict[date, List[TransactionIn]] = {}
    for txn in transactions:
        by_day.setdefault(txn.date.date(), []).append(txn)

    items = []
    for back in range(days - 1, -1, -1):
        day = today - timedelta(days=back)
        income, expenses = _totals(by_day.get(day, []))
        items.append(analytics_schemas.DailyFlowItem(
            date=day.strftime("%b %d"),
            income=income,
            expenses=expenses,
        ))
    return items

# ==========================================
# 3. MAIN ORCHESTRATOR
# ==========================================

def build_analytics(
    transactions: Sequence[TransactionIn],
    today: Optional[date] = None
) -> Optional[analytics_schemas.AnalyticsOverview]:
    """Dashboard analytics. None when there is nothing to analyze."""
    if not transactions:
        return None
    today = today or date.today()

    return analytics_schemas.AnalyticsOverview(
        comparison=month_over_month(transactions, today),
        category_breakdown=category_breakdown(transactions),
        monthly_trends=monthly_trends(transactions, today),
        daily_spending=daily_spending(transactions, today),
    )


def dashboard_summary(
    transactions: Sequence[TransactionIn],
    today: Optional[date] = None
) -> analytics_schemas.DashboardSummary:
    """Current month income/expenses/balance and the last week's daily flow.

    Unlike ``build_analytics`` this always returns a summary; an empty
    history gives zero totals.
    """
    today = today or date.today()
    this_month = month_start(today.year, today.month)
    income, expenses = _totals([t for t in transactions if t.date.date() >= this_month])

    return analytics_schemas.DashboardSummary(
        monthly_income=income,
        monthly_expenses=expenses,
        monthly_balance=income - expenses,
        last_7_days=daily_flow(transactions, today),
    )
