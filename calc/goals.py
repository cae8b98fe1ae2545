"""Passive-income goal sizing, SIP requirement and corpus projection."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, getcontext
from typing import List

from formatting import round_rupees
from models import PlanInput, ProjectionPoint

getcontext().prec = 28

MONTHS_PER_YEAR = Decimal("12")


@dataclass(frozen=True)
class GoalFunding:
    annual_passive_needed: Decimal
    corpus_needed: Decimal
    corpus_to_accumulate: Decimal
    required_sip: Decimal


def monthly_rate(annual_percent: Decimal) -> Decimal:
    """Convert an annual percentage (``12`` = 12%) to a simple monthly rate."""
    return Decimal(annual_percent) / Decimal("100") / MONTHS_PER_YEAR


def corpus_for_income(annual_income: Decimal, yield_percent: Decimal) -> Decimal:
    """Capital whose yield pays *annual_income*; zero when no yield is assumed."""
    rate = Decimal(yield_percent) / Decimal("100")
    if rate <= 0:
        return Decimal("0")
    return annual_income / rate


def required_monthly_sip(target_corpus: Decimal, annual_return_percent: Decimal, months: int) -> Decimal:
    """Monthly contribution whose future value after *months* equals *target_corpus*.

    Inverts the future value of an ordinary annuity,
    ``FV = P * ((1 + r) ** n - 1) / r``. Non-positive horizons and a zero
    growth factor both give ``0``; a zero rate falls back to straight division.
    """

    if months <= 0:
        return Decimal("0")
    rate = monthly_rate(annual_return_percent)
    if rate == 0:
        return target_corpus / months
    factor = ((Decimal("1") + rate) ** months - Decimal("1")) / rate
    if factor == 0:
        return Decimal("0")
    return target_corpus / factor


def compute_goal_funding(plan: PlanInput) -> GoalFunding:
    annual_passive = plan.target_passive_monthly * MONTHS_PER_YEAR
    corpus_needed = corpus_for_income(annual_passive, plan.assumed_yield_income_assets)
    to_accumulate = max(Decimal("0"), corpus_needed - plan.current_investments)
    sip = required_monthly_sip(
        to_accumulate, plan.assumed_accumulation_return, plan.target_timeline_months
    )
    return GoalFunding(
        annual_passive_needed=annual_passive,
        corpus_needed=corpus_needed,
        corpus_to_accumulate=to_accumulate,
        required_sip=sip,
    )


def project_investments(
    starting_corpus: Decimal,
    monthly_contribution: Decimal,
    annual_return_percent: Decimal,
    months: int,
) -> List[ProjectionPoint]:
    """Month-by-month corpus, recorded before each month's contribution.

    Contributions are made at the start of the month and earn that month's
    return. Returns ``months + 1`` points (month 0 is the starting corpus).
    """

    contribution = max(Decimal("0"), monthly_contribution)
    growth = Decimal("1") + monthly_rate(annual_return_percent)
    corpus = Decimal(starting_corpus)
    points: List[ProjectionPoint] = []
    for month in range(0, max(months, 0) + 1):
        points.append(ProjectionPoint(month=month, value=round_rupees(corpus)))
        corpus = (corpus + contribution) * growth
    return points


__all__ = [
    "GoalFunding",
    "MONTHS_PER_YEAR",
    "compute_goal_funding",
    "corpus_for_income",
    "monthly_rate",
    "project_investments",
    "required_monthly_sip",
]
