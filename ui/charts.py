"""Plotly figures for the plan dashboard."""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

import plotly.graph_objects as go
import streamlit as st

from formatting import format_inr, format_inr_short
from models import ChartData
from theme import CHART_COLORS, THEME_COLORS

AXIS_TICK_COUNT = 6

PLOTLY_DOWNLOAD_OPTIONS = {
    "format": "png",
    "height": 600,
    "width": 1000,
    "scale": 2,
}


def plotly_download_config(name: str) -> Dict[str, object]:
    return {
        "displaylogo": False,
        "toImageButtonOptions": {"filename": name, **PLOTLY_DOWNLOAD_OPTIONS},
    }


def axis_ticks(values: Sequence[Decimal | float], *, count: int = AXIS_TICK_COUNT) -> Tuple[List[float], List[str]]:
    """Evenly spaced y-axis ticks from zero (or the minimum) to the maximum."""

    numbers = [float(value) for value in values] or [0.0]
    low = min(0.0, min(numbers))
    high = max(numbers)
    if high <= low:
        return [low], [format_inr_short(low)]
    step = (high - low) / (count - 1)
    ticks = [low + step * index for index in range(count)]
    return ticks, [format_inr_short(tick) for tick in ticks]


def build_expense_figure(chart_data: ChartData) -> go.Figure:
    slices = chart_data.expense_breakdown
    figure = go.Figure(
        go.Pie(
            labels=[item.name for item in slices],
            values=[float(item.value) for item in slices],
            customdata=[format_inr(item.value) for item in slices],
            hovertemplate="%{label}: %{customdata} (%{percent})<extra></extra>",
            textinfo="percent",
            marker=dict(colors=[CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(slices))]),
            sort=False,
        )
    )
    figure.update_layout(template="plotly_white", title="Monthly Expense Breakdown", height=340)
    return figure


def build_cash_flow_figure(chart_data: ChartData) -> go.Figure:
    figure = go.Figure()
    series = (
        ("Income", "income", THEME_COLORS["positive"]),
        ("Expenses", "expenses", THEME_COLORS["negative"]),
        ("Surplus", "surplus", THEME_COLORS["accent"]),
    )
    all_values: List[Decimal] = []
    for label, attribute, color in series:
        values = [getattr(point, attribute) for point in chart_data.cash_flow]
        all_values.extend(values)
        figure.add_trace(
            go.Bar(
                name=label,
                x=[point.name for point in chart_data.cash_flow],
                y=[float(value) for value in values],
                customdata=[format_inr(value) for value in values],
                hovertemplate=f"{label}: %{{customdata}}<extra></extra>",
                marker=dict(color=color),
            )
        )
    tickvals, ticktext = axis_ticks(all_values)
    figure.update_layout(
        template="plotly_white",
        title="Monthly Cash Flow",
        barmode="group",
        height=340,
        yaxis=dict(tickvals=tickvals, ticktext=ticktext),
    )
    return figure


def build_projection_figure(chart_data: ChartData) -> go.Figure:
    points = chart_data.investment_projection
    values = [point.value for point in points]
    figure = go.Figure(
        go.Scatter(
            x=[point.month for point in points],
            y=[float(value) for value in values],
            customdata=[format_inr(value) for value in values],
            mode="lines",
            name="Projected Value",
            line=dict(color=THEME_COLORS["primary"], width=3),
            hovertemplate="Month %{x}<br>Projected Value: %{customdata}<extra></extra>",
        )
    )
    tickvals, ticktext = axis_ticks(values)
    figure.update_layout(
        template="plotly_white",
        title="Investment Growth Projection",
        height=420,
        xaxis_title="Month",
        yaxis=dict(tickvals=tickvals, ticktext=ticktext),
    )
    return figure


def render_dashboard_charts(chart_data: ChartData) -> None:
    """Lay out the three dashboard charts."""

    left, right = st.columns(2)
    with left:
        if chart_data.expense_breakdown:
            st.plotly_chart(
                build_expense_figure(chart_data),
                use_container_width=True,
                config=plotly_download_config("expense_breakdown"),
            )
        else:
            st.info("No expenses entered.")
    with right:
        st.plotly_chart(
            build_cash_flow_figure(chart_data),
            use_container_width=True,
            config=plotly_download_config("cash_flow"),
        )
    st.plotly_chart(
        build_projection_figure(chart_data),
        use_container_width=True,
        config=plotly_download_config("investment_projection"),
    )


__all__ = [
    "axis_ticks",
    "build_cash_flow_figure",
    "build_expense_figure",
    "build_projection_figure",
    "plotly_download_config",
    "render_dashboard_charts",
]
