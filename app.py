"""Streamlit entry point for the personal finance planner."""
from __future__ import annotations

import logging
import os

import streamlit as st

from state import ensure_session_defaults, load_plan_input
from theme import inject_theme
from views import render_plan_form, render_results

LOG_LEVEL = os.getenv("FINPAL_LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(
    page_title="Personal Finance Planner",
    page_icon=":moneybag:",
    layout="wide",
)

inject_theme()
ensure_session_defaults()

st.title("Interactive Personal Finance Planner")

result = st.session_state.get("plan_result")
if result is None:
    st.caption("Fill in your details to generate a custom financial plan.")
    plan, _ = load_plan_input()
    if render_plan_form(plan.to_form_values()) is not None:
        st.rerun()
else:
    st.caption("Your personalized financial roadmap.")
    render_results(result)
