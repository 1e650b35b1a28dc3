from .insights import (
    to_fixed,
    compute_metrics,
    generate_insights,
    build_summary,
    compute_insights,
)
from .insights_client import filter_to_timeframe, fetch_insights
from .periods import period_start, month_start
from .records import (
    select_all_by_owner,
    get_by_id,
    insert,
    update_by_id,
    delete_by_id,
    delete_all_by_owner,
)
from .budgets import calculate_spent, budget_progress
from .goals import goal_progress
from .analytics import (
    month_over_month,
    category_breakdown,
    monthly_trends,
    daily_spending,
    daily_flow,
    build_analytics,
    dashboard_summary,
)
from .categories import get_next_available_color, get_category_by_name
from .transactions import load_transactions
from .accounts import export_user_data, delete_user_data
