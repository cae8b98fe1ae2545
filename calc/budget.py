"""Budget split, emergency fund and surplus allocation rules."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Mapping, Tuple

from formatting import round_rupees
from models import Allocation, EXPENSE_FIELDS, PlanInput, RiskProfile

NEEDS_CATEGORIES: Tuple[str, ...] = (
    "rent",
    "groceries",
    "utilities",
    "emi",
    "insurance",
    "transport",
    "health",
)
WANTS_CATEGORIES: Tuple[str, ...] = (
    "subscriptions",
    "entertainment",
    "shopping",
    "education",
    "others",
)

NEEDS_RATIO = Decimal("0.50")
WANTS_RATIO = Decimal("0.30")
SAVINGS_RATIO = Decimal("0.20")
OVERSPEND_TOLERANCE = Decimal("0.10")

# Equity / Debt / REITs percentages per risk profile.
ALLOCATION_TABLE: Mapping[RiskProfile, Tuple[int, int, int]] = {
    RiskProfile.CONSERVATIVE: (30, 45, 25),
    RiskProfile.MODERATE: (55, 30, 15),
    RiskProfile.AGGRESSIVE: (70, 15, 15),
}
ASSET_CLASSES: Tuple[str, ...] = ("Equity", "Debt", "REITs")


@dataclass(frozen=True)
class CashFlow:
    monthly_expenses: Decimal
    net_income_after_tax: Decimal
    monthly_surplus: Decimal


@dataclass(frozen=True)
class BudgetAnalysis:
    """Needs/wants split measured against the 50/30/20 rule."""

    actual_needs: Decimal
    actual_wants: Decimal
    recommended_needs: Decimal
    recommended_wants: Decimal
    recommended_savings: Decimal
    overspend_needs: bool
    overspend_wants: bool


@dataclass(frozen=True)
class EmergencyFund:
    target: Decimal
    shortfall: Decimal


def total_expenses(plan: PlanInput) -> Decimal:
    return sum((getattr(plan, name) for name in EXPENSE_FIELDS), start=Decimal("0"))


def compute_cash_flow(plan: PlanInput) -> CashFlow:
    monthly_expenses = total_expenses(plan)
    net_after_tax = (
        plan.net_monthly_income - plan.monthly_tax_deduction + plan.monthly_side_income
    )
    return CashFlow(
        monthly_expenses=monthly_expenses,
        net_income_after_tax=net_after_tax,
        monthly_surplus=net_after_tax - monthly_expenses,
    )


def _group_total(plan: PlanInput, categories: Tuple[str, ...]) -> Decimal:
    return sum((getattr(plan, name) for name in categories), start=Decimal("0"))


def is_overspent(actual: Decimal, recommended: Decimal) -> bool:
    return actual > recommended * (Decimal("1") + OVERSPEND_TOLERANCE)


def analyse_budget(plan: PlanInput) -> BudgetAnalysis:
    """Classify spending and compare it with bands based on gross net income.

    The bands use ``net_monthly_income`` rather than the after-tax figure used
    for the surplus, so tax and side income do not move the targets.
    """

    actual_needs = _group_total(plan, NEEDS_CATEGORIES)
    actual_wants = _group_total(plan, WANTS_CATEGORIES)
    income = plan.net_monthly_income
    recommended_needs = income * NEEDS_RATIO
    recommended_wants = income * WANTS_RATIO
    return BudgetAnalysis(
        actual_needs=actual_needs,
        actual_wants=actual_wants,
        recommended_needs=recommended_needs,
        recommended_wants=recommended_wants,
        recommended_savings=income * SAVINGS_RATIO,
        overspend_needs=is_overspent(actual_needs, recommended_needs),
        overspend_wants=is_overspent(actual_wants, recommended_wants),
    )


def emergency_fund_status(plan: PlanInput, actual_needs: Decimal) -> EmergencyFund:
    target = actual_needs * plan.emergency_months_target
    shortfall = max(Decimal("0"), target - plan.current_emergency_fund)
    return EmergencyFund(target=target, shortfall=shortfall)


def allocation_percentages(profile: RiskProfile) -> Dict[str, int]:
    return dict(zip(ASSET_CLASSES, ALLOCATION_TABLE[profile]))


def allocate_surplus(monthly_surplus: Decimal, profile: RiskProfile) -> Allocation:
    """Split a positive surplus across asset classes, rounded to whole rupees."""

    if monthly_surplus <= 0:
        return Allocation()
    equity, debt, reits = (
        round_rupees(monthly_surplus * pct / Decimal("100")) for pct in ALLOCATION_TABLE[profile]
    )
    return Allocation(equity=equity, debt=debt, reits=reits)


__all__ = [
    "ALLOCATION_TABLE",
    "ASSET_CLASSES",
    "BudgetAnalysis",
    "CashFlow",
    "EmergencyFund",
    "NEEDS_CATEGORIES",
    "NEEDS_RATIO",
    "OVERSPEND_TOLERANCE",
    "SAVINGS_RATIO",
    "WANTS_CATEGORIES",
    "WANTS_RATIO",
    "allocate_surplus",
    "allocation_percentages",
    "analyse_budget",
    "compute_cash_flow",
    "emergency_fund_status",
    "is_overspent",
    "total_expenses",
]
