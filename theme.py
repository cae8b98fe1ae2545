"""Centralised colour scheme and light CSS tweaks for the planner."""
from __future__ import annotations

from typing import Dict, List

import streamlit as st

THEME_COLORS: Dict[str, str] = {
    "background": "#F9FAFB",
    "surface": "#FFFFFF",
    "primary": "#4F46E5",
    "accent": "#60A5FA",
    "positive": "#4ADE80",
    "negative": "#F87171",
    "neutral": "#E5E7EB",
    "text": "#1F2937",
    "text_subtle": "#6B7280",
    "warning": "#B27B16",
}

CHART_COLORS: List[str] = [
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#8884D8",
    "#82CA9D",
    "#FFC658",
    "#FF4560",
    "#775DD0",
    "#546E7A",
    "#26A69A",
    "#D10CE8",
]

_THEME_CSS = """
<style>
:root {{
    --planner-primary: {primary};
    --planner-surface: {surface};
    --planner-neutral: {neutral};
    --planner-text-subtle: {text_subtle};
}}
.responsive-card-grid {{
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
    gap: 1rem;
    margin-bottom: 1.5rem;
}}
.metric-card {{
    background: var(--planner-surface);
    border: 1px solid var(--planner-neutral);
    border-radius: 0.75rem;
    padding: 1rem 1.25rem;
}}
.metric-card--positive {{ border-left: 4px solid {positive}; }}
.metric-card--caution {{ border-left: 4px solid {warning}; }}
.metric-card--negative {{ border-left: 4px solid {negative}; }}
.metric-card__label {{ color: var(--planner-text-subtle); font-size: 0.85rem; }}
.metric-card__value {{ font-size: 1.6rem; font-weight: 700; margin: 0.25rem 0; }}
.metric-card__description {{ color: var(--planner-text-subtle); font-size: 0.8rem; margin: 0; }}
.visually-hidden {{
    position: absolute;
    width: 1px;
    height: 1px;
    overflow: hidden;
    clip: rect(0 0 0 0);
}}
</style>
"""


def inject_theme() -> None:
    """Inject the planner CSS variables and card styles."""

    st.markdown(_THEME_CSS.format(**THEME_COLORS), unsafe_allow_html=True)


__all__ = ["CHART_COLORS", "THEME_COLORS", "inject_theme"]
