"""Assemble a complete personal finance plan from a single input record."""
from __future__ import annotations

from decimal import Decimal
from typing import List, Tuple

from formatting import format_inr, format_months, format_percent
from models import (
    Allocation,
    CashFlowPoint,
    ChartData,
    EXPENSE_LABELS,
    ExpenseSlice,
    PlanInput,
    PlanMetrics,
    PlanResult,
    Sheet,
)

from .budget import (
    ASSET_CLASSES,
    BudgetAnalysis,
    CashFlow,
    EmergencyFund,
    allocate_surplus,
    allocation_percentages,
    analyse_budget,
    compute_cash_flow,
    emergency_fund_status,
)
from .goals import GoalFunding, compute_goal_funding, project_investments

SHEET_ORDER: Tuple[str, ...] = (
    "Recommendations",
    "SIP_Plan",
    "Budget",
    "Investment_Allocation",
    "Expenses",
    "Inputs_Summary",
)


def expense_breakdown(plan: PlanInput) -> List[ExpenseSlice]:
    """Non-zero expense categories in form order."""
    return [
        ExpenseSlice(name=EXPENSE_LABELS[name], value=amount)
        for name, amount in plan.expenses().items()
        if amount > 0
    ]


def build_recommendations(
    plan: PlanInput,
    cash_flow: CashFlow,
    budget: BudgetAnalysis,
    emergency: EmergencyFund,
    goal: GoalFunding,
) -> List[str]:
    surplus = cash_flow.monthly_surplus
    sip = goal.required_sip
    lines: List[str] = []

    if budget.overspend_needs:
        lines.append(
            f"Overspending on NEEDS: Your essential expenses are {format_inr(budget.actual_needs)}, "
            f"which is higher than the recommended {format_inr(budget.recommended_needs)}. "
            "Review major costs like rent/EMI."
        )
    if budget.overspend_wants:
        lines.append(
            f"Overspending on WANTS: Your discretionary spending is {format_inr(budget.actual_wants)}, "
            f"exceeding the recommended {format_inr(budget.recommended_wants)}. "
            "Consider reducing non-essential spending."
        )
    if surplus <= 0:
        lines.append(
            "Negative Cashflow: Your expenses exceed your income. Urgent action is needed "
            "to cut costs or increase income to start saving."
        )
    else:
        lines.append(
            f"Monthly Surplus: You have {format_inr(surplus)} available for investment. "
            f"It's being allocated based on your '{plan.risk_profile.value}' profile."
        )
    if emergency.shortfall > 0:
        lines.append(
            f"Emergency Fund Shortfall: You need {format_inr(emergency.shortfall)} more to be secure. "
            "Prioritize building this fund."
        )
    if sip > 0:
        lines.append(
            f"Goal SIP: To reach {format_inr(plan.target_passive_monthly)}/month passive income in "
            f"{format_months(plan.target_timeline_months)}, a monthly SIP of ≈ {format_inr(sip)} is needed."
        )
        if surplus < sip:
            deficit = sip - max(surplus, Decimal("0"))
            lines.append(
                f"SIP Deficit: Your surplus is {format_inr(deficit)} less than the required SIP. "
                "Consider extending your timeline, increasing savings, or boosting income."
            )
        else:
            lines.append(
                "On Track: Your monthly surplus is sufficient to fund the required SIP for your goal. "
                "Stay consistent!"
            )
    else:
        lines.append(
            "Goal Achieved: Your current investments are sufficient to generate your passive "
            "income goal. Consider shifting to income-generating assets."
        )
    return lines


def _recommendations_sheet(lines: List[str]) -> Sheet:
    return Sheet.from_rows("Recommendations", [["Actionable Advice"], *([line] for line in lines)])


def _sip_sheet(plan: PlanInput, cash_flow: CashFlow, goal: GoalFunding) -> Sheet:
    sufficient = "Yes" if cash_flow.monthly_surplus >= goal.required_sip else "No"
    return Sheet.from_rows(
        "SIP_Plan",
        [
            ["Metric", "Value"],
            ["Passive Monthly Target", format_inr(plan.target_passive_monthly)],
            ["Corpus Needed for Goal", format_inr(goal.corpus_needed)],
            ["Current Investments", format_inr(plan.current_investments)],
            ["Corpus to Accumulate", format_inr(goal.corpus_to_accumulate)],
            ["Required Monthly SIP", format_inr(goal.required_sip)],
            ["Available Monthly Surplus", format_inr(cash_flow.monthly_surplus)],
            ["Sufficient Surplus for SIP?", sufficient],
        ],
    )


def _budget_sheet(cash_flow: CashFlow, budget: BudgetAnalysis) -> Sheet:
    savings = max(Decimal("0"), cash_flow.monthly_surplus)
    return Sheet.from_rows(
        "Budget",
        [
            ["Budget Component", "Actual (₹)", "Recommended (₹)"],
            ["Needs (Essentials)", format_inr(budget.actual_needs), format_inr(budget.recommended_needs)],
            ["Wants (Discretionary)", format_inr(budget.actual_wants), format_inr(budget.recommended_wants)],
            ["Savings & Investments", format_inr(savings), format_inr(budget.recommended_savings)],
        ],
    )


def _allocation_sheet(plan: PlanInput, allocation: Allocation) -> Sheet:
    percentages = allocation_percentages(plan.risk_profile)
    amounts = dict(zip(ASSET_CLASSES, (allocation.equity, allocation.debt, allocation.reits)))
    rows: List[List[str]] = [["Asset Class", "Allocation %", "Monthly Investment (₹)"]]
    for asset in ASSET_CLASSES:
        rows.append([asset, format_percent(percentages[asset]), format_inr(amounts[asset])])
    rows.append(["Total Surplus Allocated", "100%", format_inr(allocation.total)])
    return Sheet.from_rows("Investment_Allocation", rows)


def _expenses_sheet(slices: List[ExpenseSlice], cash_flow: CashFlow) -> Sheet:
    rows: List[List[str]] = [["Category", "Amount (₹)"]]
    rows.extend([item.name, format_inr(item.value)] for item in slices)
    rows.append(["Total Monthly Expenses", format_inr(cash_flow.monthly_expenses)])
    return Sheet.from_rows("Expenses", rows)


def _inputs_sheet(plan: PlanInput) -> Sheet:
    return Sheet.from_rows(
        "Inputs_Summary",
        [
            ["Field", "Value"],
            ["Net Monthly Income", format_inr(plan.net_monthly_income)],
            ["Side Income", format_inr(plan.monthly_side_income)],
            ["Risk Profile", plan.risk_profile.value],
            ["Passive Income Target", f"{format_inr(plan.target_passive_monthly)}/mo"],
            ["Target Timeline", format_months(plan.target_timeline_months)],
            ["Current Investments", format_inr(plan.current_investments)],
            ["Current Emergency Fund", format_inr(plan.current_emergency_fund)],
        ],
    )


def generate_plan(plan: PlanInput) -> PlanResult:
    """Compute budget, goal funding, allocation and projection for *plan*.

    Pure and deterministic: no I/O, no shared state, and no exceptions for
    zero or negative figures (every division is guarded).
    """

    cash_flow = compute_cash_flow(plan)
    budget = analyse_budget(plan)
    emergency = emergency_fund_status(plan, budget.actual_needs)
    goal = compute_goal_funding(plan)
    allocation = allocate_surplus(cash_flow.monthly_surplus, plan.risk_profile)
    recommendations = build_recommendations(plan, cash_flow, budget, emergency, goal)

    slices = expense_breakdown(plan)
    projection = project_investments(
        plan.current_investments,
        cash_flow.monthly_surplus,
        plan.assumed_accumulation_return,
        plan.target_timeline_months,
    )
    chart_data = ChartData(
        expense_breakdown=tuple(slices),
        cash_flow=(
            CashFlowPoint(
                name="Cash Flow",
                income=cash_flow.net_income_after_tax,
                expenses=cash_flow.monthly_expenses,
                surplus=max(Decimal("0"), cash_flow.monthly_surplus),
            ),
        ),
        investment_projection=tuple(projection),
    )

    sheets = (
        _recommendations_sheet(recommendations),
        _sip_sheet(plan, cash_flow, goal),
        _budget_sheet(cash_flow, budget),
        _allocation_sheet(plan, allocation),
        _expenses_sheet(slices, cash_flow),
        _inputs_sheet(plan),
    )

    metrics = PlanMetrics(
        monthly_expenses=cash_flow.monthly_expenses,
        net_income_after_tax=cash_flow.net_income_after_tax,
        monthly_surplus=cash_flow.monthly_surplus,
        actual_needs=budget.actual_needs,
        actual_wants=budget.actual_wants,
        recommended_needs=budget.recommended_needs,
        recommended_wants=budget.recommended_wants,
        recommended_savings=budget.recommended_savings,
        overspend_needs=budget.overspend_needs,
        overspend_wants=budget.overspend_wants,
        emergency_target=emergency.target,
        emergency_shortfall=emergency.shortfall,
        annual_passive_needed=goal.annual_passive_needed,
        corpus_needed=goal.corpus_needed,
        corpus_to_accumulate=goal.corpus_to_accumulate,
        required_sip=goal.required_sip,
        allocation=allocation,
    )
    return PlanResult(
        sheets=sheets,
        chart_data=chart_data,
        metrics=metrics,
        recommendations=tuple(recommendations),
    )


__all__ = ["SHEET_ORDER", "build_recommendations", "expense_breakdown", "generate_plan"]
