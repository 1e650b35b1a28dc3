from datetime import date
from typing import Any, Dict, Iterable

from ..schemas.insights import TransactionIn, TransactionType
from .periods import period_start


def calculate_spent(budget: Any, transactions: Iterable[TransactionIn], today: date) -> float:
    """Expenses in the budget's category since the start of its current period."""
    start = period_start(getattr(budget.period, "value", budget.period), today)
    return sum(
        (t.amount for t in transactions
         if t.type == TransactionType.EXPENSE
         and t.category == budget.category
         and t.date.date() >= start),
        0.0,
    )


def budget_progress(budget: Any, transactions: Iterable[TransactionIn], today: date) -> Dict[str, Any]:
    spent = calculate_spent(budget, transactions, today)
    amount = float(budget.amount)
    return {
        "spent": round(spent, 2),
        "remaining": round(amount - spent, 2),
        "percent_used": round(spent / amount * 100, 1) if amount > 0 else 0.0,
        "is_over_budget": spent > amount,
    }
