"""Typed inputs and results for the personal finance plan calculator."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, field_validator

Cell = Union[str, int, float, Decimal]

EXPENSE_FIELDS: Tuple[str, ...] = (
    "rent",
    "groceries",
    "utilities",
    "transport",
    "emi",
    "insurance",
    "subscriptions",
    "education",
    "health",
    "entertainment",
    "shopping",
    "others",
)

EXPENSE_LABELS: Dict[str, str] = {
    "rent": "Rent",
    "groceries": "Groceries",
    "utilities": "Utilities",
    "transport": "Transport",
    "emi": "EMI",
    "insurance": "Insurance",
    "subscriptions": "Subscriptions",
    "education": "Education",
    "health": "Health",
    "entertainment": "Entertainment",
    "shopping": "Shopping",
    "others": "Others",
}

MONEY_FIELDS: Tuple[str, ...] = (
    "net_monthly_income",
    "monthly_tax_deduction",
    "monthly_side_income",
    *EXPENSE_FIELDS,
    "current_investments",
    "current_emergency_fund",
    "target_passive_monthly",
)

PERCENT_FIELDS: Tuple[str, ...] = (
    "assumed_yield_income_assets",
    "assumed_accumulation_return",
)

MONTH_FIELDS: Tuple[str, ...] = (
    "emergency_months_target",
    "target_timeline_months",
)


class RiskProfile(str, Enum):
    """Investor temperament driving the surplus allocation split."""

    CONSERVATIVE = "Conservative"
    MODERATE = "Moderate"
    AGGRESSIVE = "Aggressive"


class PlanInput(BaseModel):
    """Flat record of everything the planning form collects.

    Amounts are monthly rupee figures; the two percentage fields use whole
    numbers (``7`` means 7%). Ranges are deliberately not enforced here so
    that degenerate figures still flow through the calculator; the form
    applies :func:`validators.validate_plan_input` first.
    """

    model_config = ConfigDict(frozen=True)

    net_monthly_income: Decimal = Decimal("0")
    monthly_tax_deduction: Decimal = Decimal("0")
    monthly_side_income: Decimal = Decimal("0")

    rent: Decimal = Decimal("0")
    groceries: Decimal = Decimal("0")
    utilities: Decimal = Decimal("0")
    transport: Decimal = Decimal("0")
    emi: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    subscriptions: Decimal = Decimal("0")
    education: Decimal = Decimal("0")
    health: Decimal = Decimal("0")
    entertainment: Decimal = Decimal("0")
    shopping: Decimal = Decimal("0")
    others: Decimal = Decimal("0")

    current_investments: Decimal = Decimal("0")
    current_emergency_fund: Decimal = Decimal("0")

    emergency_months_target: int = 6
    target_passive_monthly: Decimal = Decimal("0")
    target_timeline_months: int = 12
    assumed_yield_income_assets: Decimal = Decimal("0")
    assumed_accumulation_return: Decimal = Decimal("0")
    risk_profile: RiskProfile = RiskProfile.MODERATE

    @field_validator(*MONEY_FIELDS, *PERCENT_FIELDS, mode="before")
    @classmethod
    def _coerce_decimal(cls, value: object) -> Decimal:
        if value is None or value == "":
            return Decimal("0")
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError("Enter a numeric amount.") from exc
        if not amount.is_finite():
            raise ValueError("Enter a numeric amount.")
        return amount

    @field_validator(*MONTH_FIELDS, mode="before")
    @classmethod
    def _coerce_months(cls, value: object) -> int:
        if value is None or value == "":
            return 0
        try:
            months = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError("Enter a whole number of months.") from exc
        if not months.is_finite() or months != months.to_integral_value():
            raise ValueError("Enter a whole number of months.")
        return int(months)

    def expenses(self) -> Dict[str, Decimal]:
        """Return the twelve expense categories in form order."""
        return {name: getattr(self, name) for name in EXPENSE_FIELDS}

    def to_form_values(self) -> Dict[str, object]:
        """Plain values suitable for seeding the Streamlit form widgets."""
        values: Dict[str, object] = {}
        for name in MONEY_FIELDS + PERCENT_FIELDS:
            values[name] = float(getattr(self, name))
        for name in MONTH_FIELDS:
            values[name] = int(getattr(self, name))
        values["risk_profile"] = self.risk_profile.value
        return values


@dataclass(frozen=True)
class Sheet:
    """Named table whose first row is the header."""

    name: str
    rows: Tuple[Tuple[Cell, ...], ...]

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[Sequence[Cell]]) -> "Sheet":
        return cls(name=name, rows=tuple(tuple(row) for row in rows))

    @property
    def header(self) -> Tuple[Cell, ...]:
        return self.rows[0] if self.rows else ()

    @property
    def records(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self.rows[1:]

    def lookup(self, label: str, default: Cell | None = None) -> Cell | None:
        """Return the value next to *label* in the first column."""
        for row in self.records:
            if row and row[0] == label:
                return row[1] if len(row) > 1 else default
        return default

    def to_dataframe(self) -> pd.DataFrame:
        columns = [str(cell) for cell in self.header]
        return pd.DataFrame([list(row) for row in self.records], columns=columns)


@dataclass(frozen=True)
class ExpenseSlice:
    name: str
    value: Decimal


@dataclass(frozen=True)
class CashFlowPoint:
    name: str
    income: Decimal
    expenses: Decimal
    surplus: Decimal


@dataclass(frozen=True)
class ProjectionPoint:
    month: int
    value: Decimal


@dataclass(frozen=True)
class ChartData:
    """Series consumed by the chart renderer."""

    expense_breakdown: Tuple[ExpenseSlice, ...]
    cash_flow: Tuple[CashFlowPoint, ...]
    investment_projection: Tuple[ProjectionPoint, ...]


@dataclass(frozen=True)
class Allocation:
    """Monthly rupee amounts per asset class."""

    equity: Decimal = Decimal("0")
    debt: Decimal = Decimal("0")
    reits: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.equity + self.debt + self.reits


@dataclass(frozen=True)
class PlanMetrics:
    """Typed figures behind the formatted sheets."""

    monthly_expenses: Decimal
    net_income_after_tax: Decimal
    monthly_surplus: Decimal
    actual_needs: Decimal
    actual_wants: Decimal
    recommended_needs: Decimal
    recommended_wants: Decimal
    recommended_savings: Decimal
    overspend_needs: bool
    overspend_wants: bool
    emergency_target: Decimal
    emergency_shortfall: Decimal
    annual_passive_needed: Decimal
    corpus_needed: Decimal
    corpus_to_accumulate: Decimal
    required_sip: Decimal
    allocation: Allocation = field(default_factory=Allocation)


@dataclass(frozen=True)
class PlanResult:
    """Everything produced by one run of the plan calculator."""

    sheets: Tuple[Sheet, ...]
    chart_data: ChartData
    metrics: PlanMetrics
    recommendations: Tuple[str, ...] = ()

    def sheet(self, name: str) -> Sheet:
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        raise KeyError(name)

    def sheet_names(self) -> List[str]:
        return [sheet.name for sheet in self.sheets]


DEFAULT_PLAN_INPUT = PlanInput(
    net_monthly_income=Decimal("50000"),
    monthly_tax_deduction=Decimal("0"),
    monthly_side_income=Decimal("0"),
    rent=Decimal("15000"),
    groceries=Decimal("5000"),
    utilities=Decimal("2000"),
    transport=Decimal("1500"),
    emi=Decimal("0"),
    insurance=Decimal("1000"),
    subscriptions=Decimal("500"),
    education=Decimal("0"),
    health=Decimal("1000"),
    entertainment=Decimal("2000"),
    shopping=Decimal("2000"),
    others=Decimal("1000"),
    current_emergency_fund=Decimal("50000"),
    emergency_months_target=6,
    current_investments=Decimal("100000"),
    risk_profile=RiskProfile.MODERATE,
    target_passive_monthly=Decimal("10000"),
    target_timeline_months=36,
    assumed_yield_income_assets=Decimal("7"),
    assumed_accumulation_return=Decimal("12"),
)
