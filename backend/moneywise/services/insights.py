"""Rule-based insight engine.

Folds a list of transactions into aggregate metrics and maps those metrics
through fixed threshold rules into advisory insights. Pure: no I/O, no
mutation of the input. Both the HTTP endpoint and the in-process client call
``compute_insights`` so their output is identical for the same input.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional

from ..schemas.insights import (
    AggregateMetrics,
    Insight,
    InsightResponse,
    InsightSummary,
    InsightType,
    Severity,
    Timeframe,
    TransactionIn,
    TransactionType,
)

RECENT_DAYS = 3
TREND_THRESHOLD = 1.2
TARGET_SAVINGS_RATE = 20

# Plain-decimal output below 1e21; JS switches to exponent form above it
_FIXED_CONTEXT = Context(prec=60)
_EXPONENT_THRESHOLD = 1e21


def to_fixed(value: float, digits: int) -> str:
    """Format like JavaScript's Number.prototype.toFixed.

    Rounds the exact binary value half away from zero. Negative values that
    round to zero keep their sign ("-0.00"); only zero itself is unsigned.
    Non-finite values render as "Infinity", "-Infinity" and "NaN", and
    magnitudes of 1e21 or more fall back to exponent notation.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0
    if abs(value) >= _EXPONENT_THRESHOLD:
        return repr(float(value))

    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
    return f"{rounded:.{digits}f}"


def _mean(values: List[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)


# ==========================================
# 1. METRICS
# ==========================================

def compute_metrics(transactions: Iterable[TransactionIn]) -> AggregateMetrics:
    """Totals, per-category and per-day expense folds, top category and averages."""
    total_income = 0.0
    total_expenses = 0.0
    by_category: Dict[str, float] = {}
    by_day: Dict[str, float] = {}

    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
        elif txn.type == TransactionType.EXPENSE:
            total_expenses += txn.amount
            by_category[txn.category] = by_category.get(txn.category, 0.0) + txn.amount
            by_day[txn.day] = by_day.get(txn.day, 0.0) + txn.amount

    # Strict '>' keeps the first-seen category on ties
    top_category = None
    for name, amount in by_category.items():
        if top_category is None or amount > top_category[1]:
            top_category = (name, amount)

    recent_days = sorted(by_day, reverse=True)[:RECENT_DAYS]

    return AggregateMetrics(
        total_income=total_income,
        total_expenses=total_expenses,
        net_income=total_income - total_expenses,
        expenses_by_category=by_category,
        top_expense_category=top_category,
        daily_expense_totals=by_day,
        average_daily_expense=_mean(list(by_day.values())),
        recent_average_expense=_mean([by_day[d] for d in recent_days]),
    )


# ==========================================
# 2. RULES
# ==========================================

def _top_category_insight(metrics: AggregateMetrics, timeframe: str) -> Optional[Insight]:
    if metrics.top_expense_category is None:
        return None
    name, amount = metrics.top_expense_category
    return Insight(
        type=InsightType.SPENDING_PATTERN,
        title="Top Expense Category",
        description=(
            f"Your highest expense category is {name} with "
            f"${to_fixed(amount, 2)} spent this {timeframe}."
        ),
        severity=Severity.MEDIUM,
        action_suggested=f"Consider setting a budget limit for {name} to better control spending.",
    )


def _budget_alert_insight(metrics: AggregateMetrics, timeframe: str) -> Optional[Insight]:
    if not metrics.net_income < 0:
        return None
    return Insight(
        type=InsightType.BUDGET_ALERT,
        title="Spending Exceeds Income",
        description=(
            f"You've spent ${to_fixed(abs(metrics.net_income), 2)} "
            f"more than you earned this {timeframe}."
        ),
        severity=Severity.HIGH,
        action_suggested="Review your expenses and consider reducing spending in non-essential categories.",
    )


def _saving_tip_insight(metrics: AggregateMetrics, timeframe: str) -> Optional[Insight]:
    # net > 0 implies total_income > 0
    if not metrics.net_income > 0:
        return None
    savings_rate = metrics.net_income / metrics.total_income * 100
    if savings_rate < TARGET_SAVINGS_RATE:
        action = "Consider increasing your savings rate to 20% for better financial health."
    else:
        action = "Keep up the excellent saving habits!"
    return Insight(
        type=InsightType.SAVING_TIP,
        title="Great Saving Progress",
        description=f"You saved {to_fixed(savings_rate, 1)}% of your income this {timeframe}!",
        severity=Severity.LOW,
        action_suggested=action,
    )


def _spending_trend_insight(metrics: AggregateMetrics) -> Optional[Insight]:
    if metrics.average_daily_expense is None or metrics.recent_average_expense is None:
        return None
    if not metrics.recent_average_expense > metrics.average_daily_expense * TREND_THRESHOLD:
        return None
    return Insight(
        type=InsightType.SPENDING_PATTERN,
        title="Increased Spending Detected",
        description="Your recent daily spending is 20% higher than your average.",
        severity=Severity.MEDIUM,
        action_suggested="Review recent transactions and identify areas where you can reduce spending.",
    )


def generate_insights(metrics: AggregateMetrics, timeframe: Timeframe) -> List[Insight]:
    """Evaluate the rules in their fixed order; severity does not affect ordering."""
    label = Timeframe(timeframe).value
    candidates = [
        _top_category_insight(metrics, label),
        _budget_alert_insight(metrics, label),
        _saving_tip_insight(metrics, label),
        _spending_trend_insight(metrics),
    ]
    return [insight for insight in candidates if insight is not None]


# ==========================================
# 3. SUMMARY & ENTRY POINT
# ==========================================

def build_summary(metrics: AggregateMetrics) -> InsightSummary:
    if metrics.total_income > 0:
        savings_rate = to_fixed(metrics.net_income / metrics.total_income * 100, 1)
    else:
        savings_rate = "0"

    top = metrics.top_expense_category
    return InsightSummary(
        total_income=metrics.total_income,
        total_expenses=metrics.total_expenses,
        net_income=metrics.net_income,
        top_expense_category=top[0] if top else None,
        savings_rate=savings_rate,
    )


def compute_insights(transactions: Iterable[TransactionIn], timeframe: Timeframe) -> InsightResponse:
    metrics = compute_metrics(transactions)
    return InsightResponse(
        insights=generate_insights(metrics, timeframe),
        summary=build_summary(metrics),
    )
