from datetime import date, timedelta

# Budget periods and insight timeframes share the same window starts
_PERIOD_ALIASES = {
    "week": "weekly",
    "month": "monthly",
    "year": "yearly",
}


def period_start(period: str, today: date) -> date:
    """First day of the period containing ``today``.

    Weeks start on Sunday, months on the 1st and years on January 1st.
    """
    period = _PERIOD_ALIASES.get(period, period)
    if period == "weekly":
        # date.weekday(): Monday=0 ... Sunday=6
        return today - timedelta(days=(today.weekday() + 1) % 7)
    if period == "monthly":
        return today.replace(day=1)
    if period == "yearly":
        return today.replace(month=1, day=1)
    raise ValueError(f"Unknown period: {period}")


def month_start(year: int, month: int) -> date:
    """Start of a month given a possibly out-of-range month number."""
    total = year * 12 + (month - 1)
    return date(total // 12, total % 12 + 1, 1)
