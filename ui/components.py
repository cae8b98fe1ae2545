"""Reusable UI helpers for metric cards and recommendation callouts."""
from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Sequence

import streamlit as st

from formatting import format_inr
from models import PlanMetrics


@dataclass(frozen=True)
class MetricCard:
    label: str
    value: str
    description: str | None = None
    tone: str | None = None  # "positive", "caution" or "negative"


_TONE_BADGES: dict[str, str] = {
    "positive": "On track",
    "caution": "Watch",
    "negative": "Action needed",
}

# Recommendation prefixes mapped to the callout renderer used for them.
_CALLOUT_TONES: dict[str, str] = {
    "Overspending": "warning",
    "Negative Cashflow": "error",
    "Emergency Fund Shortfall": "warning",
    "SIP Deficit": "warning",
    "Monthly Surplus": "info",
    "Goal SIP": "info",
    "On Track": "success",
    "Goal Achieved": "success",
}


def plan_metric_cards(metrics: PlanMetrics) -> List[MetricCard]:
    """Headline figures shown above the dashboard charts."""

    surplus = metrics.monthly_surplus
    sip = metrics.required_sip
    return [
        MetricCard(
            label="Monthly Surplus",
            value=format_inr(surplus),
            description="Income after tax minus expenses",
            tone="positive" if surplus > 0 else "negative",
        ),
        MetricCard(
            label="Required Monthly SIP",
            value=format_inr(sip),
            description="To reach the passive income goal",
            tone="positive" if surplus >= sip else "caution",
        ),
        MetricCard(
            label="Emergency Fund Gap",
            value=format_inr(metrics.emergency_shortfall),
            description=f"Target {format_inr(metrics.emergency_target)}",
            tone="caution" if metrics.emergency_shortfall > 0 else "positive",
        ),
        MetricCard(
            label="Corpus Needed",
            value=format_inr(metrics.corpus_needed),
            description=f"{format_inr(metrics.corpus_to_accumulate)} still to accumulate",
        ),
    ]


def render_metric_cards(cards: Sequence[MetricCard], *, grid_aria_label: str | None = None) -> None:
    """Render metric cards in a responsive grid."""

    if not cards:
        return
    blocks: list[str] = []
    for card in cards:
        tone_class = f" metric-card--{card.tone}" if card.tone else ""
        badge = ""
        if card.tone in _TONE_BADGES:
            badge = f"<span class='visually-hidden'>{html.escape(_TONE_BADGES[card.tone])}</span>"
        description_html = (
            f"<p class='metric-card__description'>{html.escape(card.description)}</p>"
            if card.description
            else ""
        )
        blocks.append(
            f"<section role='group' class='metric-card{tone_class}'>"
            f"<span class='metric-card__label'>{html.escape(card.label)}</span>{badge}"
            f"<p class='metric-card__value'>{html.escape(card.value)}</p>"
            f"{description_html}"
            "</section>"
        )
    region_attrs = ""
    if grid_aria_label:
        region_attrs = f" role='region' aria-label='{html.escape(grid_aria_label)}' aria-live='polite'"
    st.markdown(
        f"<div class='responsive-card-grid'{region_attrs}>" + "".join(blocks) + "</div>",
        unsafe_allow_html=True,
    )


def callout_kind(line: str) -> str:
    for prefix, kind in _CALLOUT_TONES.items():
        if line.startswith(prefix):
            return kind
    return "info"


def render_recommendations(lines: Sequence[str]) -> None:
    """Show each recommendation line with a severity matching its prefix."""

    renderers = {
        "info": st.info,
        "success": st.success,
        "warning": st.warning,
        "error": st.error,
    }
    for line in lines:
        renderers[callout_kind(line)](line)


__all__ = [
    "MetricCard",
    "callout_kind",
    "plan_metric_cards",
    "render_metric_cards",
    "render_recommendations",
]
