"""Tests for the budget lookup tables and surplus allocation."""
from decimal import Decimal

import pytest

from calc.budget import (
    ALLOCATION_TABLE,
    NEEDS_CATEGORIES,
    WANTS_CATEGORIES,
    allocate_surplus,
    allocation_percentages,
    analyse_budget,
    compute_cash_flow,
    emergency_fund_status,
    is_overspent,
)
from models import EXPENSE_FIELDS, RiskProfile


def test_needs_and_wants_partition_all_categories() -> None:
    assert set(NEEDS_CATEGORIES).isdisjoint(WANTS_CATEGORIES)
    assert set(NEEDS_CATEGORIES) | set(WANTS_CATEGORIES) == set(EXPENSE_FIELDS)


@pytest.mark.parametrize("profile", list(RiskProfile))
def test_allocation_percentages_sum_to_hundred(profile) -> None:
    assert sum(ALLOCATION_TABLE[profile]) == 100
    assert sum(allocation_percentages(profile).values()) == 100


def test_allocation_table_values() -> None:
    assert allocation_percentages(RiskProfile.CONSERVATIVE) == {"Equity": 30, "Debt": 45, "REITs": 25}
    assert allocation_percentages(RiskProfile.MODERATE) == {"Equity": 55, "Debt": 30, "REITs": 15}
    assert allocation_percentages(RiskProfile.AGGRESSIVE) == {"Equity": 70, "Debt": 15, "REITs": 15}


@pytest.mark.parametrize("surplus", ["0", "-1", "-25000"])
def test_no_allocation_without_surplus(surplus) -> None:
    allocation = allocate_surplus(Decimal(surplus), RiskProfile.AGGRESSIVE)
    assert (allocation.equity, allocation.debt, allocation.reits) == (0, 0, 0)


@pytest.mark.parametrize("profile", list(RiskProfile))
@pytest.mark.parametrize("surplus", ["1", "7", "333", "12345.67", "99999"])
def test_allocation_rounding_residual_is_small(profile, surplus) -> None:
    amount = Decimal(surplus)
    allocation = allocate_surplus(amount, profile)
    assert abs(allocation.total - amount) <= 3


def test_allocation_rounds_half_up() -> None:
    allocation = allocate_surplus(Decimal("10"), RiskProfile.CONSERVATIVE)
    # 3.0 / 4.5 / 2.5
    assert allocation.equity == Decimal("3")
    assert allocation.debt == Decimal("5")
    assert allocation.reits == Decimal("3")


def test_cash_flow_includes_tax_and_side_income(make_plan) -> None:
    flow = compute_cash_flow(make_plan(monthly_tax_deduction=4000, monthly_side_income=1500))
    assert flow.net_income_after_tax == Decimal("47500")
    assert flow.monthly_surplus == flow.net_income_after_tax - flow.monthly_expenses


def test_is_overspent_boundary() -> None:
    assert not is_overspent(Decimal("110"), Decimal("100"))
    assert is_overspent(Decimal("110.01"), Decimal("100"))


def test_wants_overspend_flag(make_plan) -> None:
    budget = analyse_budget(make_plan(entertainment=15000))
    assert budget.actual_wants == Decimal("18500")
    assert budget.overspend_wants
    assert not budget.overspend_needs


def test_emergency_fund_scales_needs_by_months(make_plan) -> None:
    plan = make_plan(emergency_months_target=3, current_emergency_fund=80000)
    status = emergency_fund_status(plan, Decimal("25500"))
    assert status.target == Decimal("76500")
    assert status.shortfall == Decimal("0")
