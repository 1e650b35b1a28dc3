from .insights import (
    TransactionType,
    Timeframe,
    InsightType,
    Severity,
    TransactionIn,
    AggregateMetrics,
    Insight,
    InsightSummary,
    InsightRequest,
    InsightResponse
)
from .transactions import TransactionBase, TransactionCreate, TransactionUpdate, TransactionOut
from .categories import CategoryBase, CategoryOut, CategoryCreate
from .budgets import BudgetPeriod, BudgetBase, BudgetCreate, BudgetUpdate, BudgetOut, BudgetWithProgress
from .goals import GoalBase, GoalCreate, GoalUpdate, GoalProgressUpdate, GoalOut, GoalWithProgress
from .analytics import (
    PeriodTotals,
    MonthComparison,
    CategorySlice,
    MonthlyTrendItem,
    DailySpendItem,
    AnalyticsOverview,
    DailyFlowItem,
    DashboardSummary
)
from .accounts import UserExport, AccountDeletion
