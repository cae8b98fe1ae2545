"""Tests for the dashboard figure builders and presentation helpers."""
from decimal import Decimal

import pytest

from calc import SHEET_ORDER, generate_plan
from ui.charts import (
    axis_ticks,
    build_cash_flow_figure,
    build_expense_figure,
    build_projection_figure,
)
from ui.components import callout_kind, plan_metric_cards
from views.results import result_tabs, tab_label


@pytest.fixture
def plan_result(default_plan):
    return generate_plan(default_plan)


def test_axis_ticks_span_zero_to_max() -> None:
    values, labels = axis_ticks([Decimal("0"), Decimal("100")])
    assert values == pytest.approx([0, 20, 40, 60, 80, 100])
    assert len(labels) == 6
    assert labels[0] == "₹0"


def test_axis_ticks_flat_series() -> None:
    values, labels = axis_ticks([])
    assert values == [0.0]
    assert len(labels) == 1


def test_expense_figure_has_one_slice_per_category(plan_result) -> None:
    figure = build_expense_figure(plan_result.chart_data)
    pie = figure.data[0]
    assert list(pie.labels) == [item.name for item in plan_result.chart_data.expense_breakdown]
    assert pie.customdata[0] == "₹15,000"


def test_cash_flow_figure_groups_three_series(plan_result) -> None:
    figure = build_cash_flow_figure(plan_result.chart_data)
    assert [trace.name for trace in figure.data] == ["Income", "Expenses", "Surplus"]
    assert figure.layout.barmode == "group"
    assert list(figure.data[2].y) == [19000.0]


def test_projection_figure_covers_timeline(plan_result) -> None:
    figure = build_projection_figure(plan_result.chart_data)
    line = figure.data[0]
    assert list(line.x) == list(range(37))
    assert line.y[0] == 100000.0


def test_metric_cards_flag_sip_gap(plan_result) -> None:
    cards = {card.label: card for card in plan_metric_cards(plan_result.metrics)}
    assert cards["Monthly Surplus"].value == "₹19,000"
    assert cards["Monthly Surplus"].tone == "positive"
    assert cards["Required Monthly SIP"].tone == "caution"
    assert cards["Emergency Fund Gap"].value == "₹1,03,000"


@pytest.mark.parametrize(
    ("line", "kind"),
    [
        ("Negative Cashflow: Your expenses exceed your income.", "error"),
        ("Overspending on WANTS: ...", "warning"),
        ("On Track: Your monthly surplus is sufficient.", "success"),
        ("Goal SIP: To reach ...", "info"),
        ("Something unexpected", "info"),
    ],
)
def test_callout_kind(line, kind) -> None:
    assert callout_kind(line) == kind


def test_result_tabs_lead_with_dashboard(plan_result) -> None:
    tabs = result_tabs(plan_result)
    assert tabs[0] == "Dashboard"
    assert tabs[1:] == list(SHEET_ORDER)
    assert tab_label("Investment_Allocation") == "Investment Allocation"
