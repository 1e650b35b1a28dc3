from datetime import date
from typing import Any, Dict


def goal_progress(goal: Any, today: date) -> Dict[str, Any]:
    """Progress towards a savings goal as of ``today``.

    ``days_left`` is negative once the target date has passed.
    """
    target = float(goal.target_amount)
    current = float(goal.current_amount or 0.0)
    progress = current / target * 100 if target > 0 else 0.0
    days_left = (goal.target_date - today).days

    return {
        "progress_percent": round(progress, 1),
        "remaining": round(max(0.0, target - current), 2),
        "days_left": days_left,
        "is_overdue": days_left < 0,
        "is_completed": progress >= 100,
    }
