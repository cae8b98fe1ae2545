"""Model package exports."""

from .plan import (
    Allocation,
    CashFlowPoint,
    ChartData,
    DEFAULT_PLAN_INPUT,
    EXPENSE_FIELDS,
    EXPENSE_LABELS,
    ExpenseSlice,
    MONEY_FIELDS,
    MONTH_FIELDS,
    PERCENT_FIELDS,
    PlanInput,
    PlanMetrics,
    PlanResult,
    ProjectionPoint,
    RiskProfile,
    Sheet,
)

__all__ = [
    "Allocation",
    "CashFlowPoint",
    "ChartData",
    "DEFAULT_PLAN_INPUT",
    "EXPENSE_FIELDS",
    "EXPENSE_LABELS",
    "ExpenseSlice",
    "MONEY_FIELDS",
    "MONTH_FIELDS",
    "PERCENT_FIELDS",
    "PlanInput",
    "PlanMetrics",
    "PlanResult",
    "ProjectionPoint",
    "RiskProfile",
    "Sheet",
]
