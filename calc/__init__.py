"""Calculation helpers for personal finance plan outputs."""

from .budget import (
    ALLOCATION_TABLE,
    ASSET_CLASSES,
    NEEDS_CATEGORIES,
    WANTS_CATEGORIES,
    allocate_surplus,
    analyse_budget,
    compute_cash_flow,
    emergency_fund_status,
)
from .goals import compute_goal_funding, project_investments, required_monthly_sip
from .plan import SHEET_ORDER, build_recommendations, generate_plan

__all__ = [
    "ALLOCATION_TABLE",
    "ASSET_CLASSES",
    "NEEDS_CATEGORIES",
    "SHEET_ORDER",
    "WANTS_CATEGORIES",
    "allocate_surplus",
    "analyse_budget",
    "build_recommendations",
    "compute_cash_flow",
    "compute_goal_funding",
    "emergency_fund_status",
    "generate_plan",
    "project_investments",
    "required_monthly_sip",
]
