"""Tests for corpus sizing, required SIP and the investment projection."""
from decimal import Decimal

import pytest

from calc.goals import (
    compute_goal_funding,
    corpus_for_income,
    monthly_rate,
    project_investments,
    required_monthly_sip,
)


def _compound_from_zero(contribution: Decimal, annual_percent: Decimal, months: int) -> Decimal:
    rate = monthly_rate(annual_percent)
    balance = Decimal("0")
    for _ in range(months):
        balance = balance * (1 + rate) + contribution
    return balance


@pytest.mark.parametrize(
    ("target", "annual_percent", "months"),
    [
        (Decimal("1614285.71"), Decimal("12"), 36),
        (Decimal("500000"), Decimal("8.5"), 18),
        (Decimal("2500000"), Decimal("6"), 120),
    ],
)
def test_required_sip_reaches_target_when_compounded(target, annual_percent, months) -> None:
    sip = required_monthly_sip(target, annual_percent, months)
    rounded_sip = sip.quantize(Decimal("1"))
    reached = _compound_from_zero(rounded_sip, annual_percent, months)
    tolerance = target / Decimal("10000") + months
    assert abs(reached - target) <= tolerance


def test_required_sip_zero_rate_is_straight_division() -> None:
    assert required_monthly_sip(Decimal("36000"), Decimal("0"), 36) == Decimal("1000")


@pytest.mark.parametrize("months", [0, -5])
def test_required_sip_non_positive_horizon(months) -> None:
    assert required_monthly_sip(Decimal("100000"), Decimal("12"), months) == Decimal("0")


def test_required_sip_zero_growth_factor_falls_back_to_zero() -> None:
    # -2400% a year is a monthly multiplier of -1, so an even horizon has a zero growth factor.
    assert required_monthly_sip(Decimal("100000"), Decimal("-2400"), 2) == Decimal("0")


def test_corpus_for_income_requires_positive_yield() -> None:
    assert corpus_for_income(Decimal("120000"), Decimal("8")) == Decimal("1500000")
    assert corpus_for_income(Decimal("120000"), Decimal("0")) == Decimal("0")
    assert corpus_for_income(Decimal("120000"), Decimal("-3")) == Decimal("0")


def test_goal_already_funded(make_plan) -> None:
    funding = compute_goal_funding(make_plan(current_investments=5000000))
    assert funding.corpus_to_accumulate == Decimal("0")
    assert funding.required_sip == Decimal("0")


def test_projection_length_and_first_point() -> None:
    points = project_investments(Decimal("100000"), Decimal("20000"), Decimal("12"), 36)
    assert len(points) == 37
    assert [point.month for point in points] == list(range(37))
    assert points[0].value == Decimal("100000")
    # One month of contribution at 1%: (100000 + 20000) * 1.01
    assert points[1].value == Decimal("121200")


def test_projection_is_non_decreasing_for_positive_inputs() -> None:
    points = project_investments(Decimal("25000"), Decimal("5000"), Decimal("10"), 60)
    values = [point.value for point in points]
    assert values == sorted(values)


def test_projection_ignores_negative_contribution() -> None:
    points = project_investments(Decimal("1000"), Decimal("-500"), Decimal("0"), 3)
    assert [point.value for point in points] == [Decimal("1000")] * 4


def test_projection_zero_timeline_is_single_point() -> None:
    points = project_investments(Decimal("100000"), Decimal("20000"), Decimal("12"), 0)
    assert len(points) == 1
    assert points[0].value == Decimal("100000")
