"""Planning form: collects income, assets, expenses and goals."""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Tuple

import streamlit as st

from calc import generate_plan
from models import EXPENSE_FIELDS, EXPENSE_LABELS, PlanInput, RiskProfile
from state import store_plan
from validators import collect_error_messages, validate_plan_input

logger = logging.getLogger(__name__)

INCOME_FIELDS: List[Tuple[str, str]] = [
    ("net_monthly_income", "Net Monthly Income (₹)"),
    ("monthly_side_income", "Monthly Side Income (₹)"),
    ("monthly_tax_deduction", "Monthly Tax / TDS (₹)"),
]
ASSET_FIELDS: List[Tuple[str, str]] = [
    ("current_investments", "Current Investments (₹)"),
    ("current_emergency_fund", "Current Emergency Fund (₹)"),
]
EXPENSE_INPUT_LABELS: Dict[str, str] = {
    "rent": "Rent / Mortgage (₹)",
    "emi": "EMIs / Loans (₹)",
    "health": "Health / Medical (₹)",
    "others": "Other Expenses (₹)",
}


def _rupee_input(label: str, value: object, *, key: str) -> float:
    return float(
        st.number_input(label, min_value=0.0, value=float(value or 0), step=500.0, format="%.0f", key=key)
    )


def _month_input(label: str, value: object, *, key: str) -> int:
    return int(st.number_input(label, min_value=1, value=max(int(value or 1), 1), step=1, key=key))


def _percent_input(label: str, value: object, *, key: str) -> float:
    return float(
        st.number_input(
            label,
            min_value=0.0,
            max_value=100.0,
            value=float(value or 0),
            step=0.1,
            format="%.1f",
            key=key,
        )
    )


def _render_fields(values: Mapping[str, object]) -> Dict[str, object]:
    data: Dict[str, object] = {}

    st.subheader("Income")
    columns = st.columns(3)
    for column, (name, label) in zip(columns, INCOME_FIELDS):
        with column:
            data[name] = _rupee_input(label, values.get(name), key=f"form_{name}")

    st.subheader("Current Assets")
    columns = st.columns(2)
    for column, (name, label) in zip(columns, ASSET_FIELDS):
        with column:
            data[name] = _rupee_input(label, values.get(name), key=f"form_{name}")

    st.subheader("Monthly Expenses")
    columns = st.columns(4)
    for index, name in enumerate(EXPENSE_FIELDS):
        label = EXPENSE_INPUT_LABELS.get(name, f"{EXPENSE_LABELS[name]} (₹)")
        with columns[index % 4]:
            data[name] = _rupee_input(label, values.get(name), key=f"form_{name}")

    st.subheader("Financial Goals & Profile")
    first, second, third = st.columns(3)
    with first:
        data["target_passive_monthly"] = _rupee_input(
            "Passive Income Target / mo (₹)", values.get("target_passive_monthly"), key="form_target_passive"
        )
        data["emergency_months_target"] = _month_input(
            "Emergency Fund Target (Months)", values.get("emergency_months_target"), key="form_emergency_months"
        )
    with second:
        data["target_timeline_months"] = _month_input(
            "Target Timeline (Months)", values.get("target_timeline_months"), key="form_timeline"
        )
        data["assumed_accumulation_return"] = _percent_input(
            "Assumed Accumulation Return (%)", values.get("assumed_accumulation_return"), key="form_accumulation"
        )
    with third:
        options = [profile.value for profile in RiskProfile]
        current = str(values.get("risk_profile", RiskProfile.MODERATE.value))
        data["risk_profile"] = st.selectbox(
            "Risk Profile",
            options,
            index=options.index(current) if current in options else options.index(RiskProfile.MODERATE.value),
            key="form_risk_profile",
        )
        data["assumed_yield_income_assets"] = _percent_input(
            "Assumed Income Yield (%)", values.get("assumed_yield_income_assets"), key="form_yield"
        )
    return data


def render_plan_form(values: Mapping[str, object]) -> PlanInput | None:
    """Render the form; on a valid submission compute and store the plan."""

    with st.form("planner_form"):
        data = _render_fields(values)
        submitted = st.form_submit_button("Generate My Plan", type="primary")

    if not submitted:
        return None
    plan, issues = validate_plan_input(data)
    if plan is None:
        st.error(collect_error_messages(issues))
        return None
    with st.spinner("Building your plan..."):
        result = generate_plan(plan)
    logger.debug(
        "Plan generated: surplus=%s required_sip=%s",
        result.metrics.monthly_surplus,
        result.metrics.required_sip,
    )
    store_plan(plan, result)
    return plan


__all__ = ["render_plan_form"]
