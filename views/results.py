"""Results view: dashboard, sheet tabs, workbook download and advice panel."""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, TypeVar

import streamlit as st

from models import PlanResult, Sheet
from services.advisor import AdviceError, get_financial_advice
from services.export import ExcelSheetExporter, ExportError, SheetExporter, export_filename
from state import DASHBOARD_TAB, reset_plan_state
from ui.charts import render_dashboard_charts
from ui.components import plan_metric_cards, render_metric_cards, render_recommendations

logger = logging.getLogger(__name__)

T = TypeVar("T")


def tab_label(name: str) -> str:
    return name.replace("_", " ")


def result_tabs(result: PlanResult) -> List[str]:
    return [DASHBOARD_TAB, *result.sheet_names()]


def _execute_with_spinner(label: str, task: Callable[[], T]) -> T | None:
    """Run a task while showing a spinner and surface export failures."""

    try:
        with st.spinner(f"Preparing {label}..."):
            return task()
    except ExportError as exc:
        st.error(f"Error: Could not generate the {label}. {exc}")
        return None


def _render_toolbar(result: PlanResult, exporter: SheetExporter) -> None:
    left, right = st.columns(2)
    with left:
        if st.button("Start Over", use_container_width=True):
            reset_plan_state()
            st.rerun()
    with right:
        payload = _execute_with_spinner("Excel file", lambda: exporter.export(result.sheets))
        if payload is not None:
            st.download_button(
                "Download",
                data=payload,
                file_name=export_filename(date.today()),
                mime=exporter.mime_type,
                use_container_width=True,
            )


def _render_sheet(sheet: Sheet) -> None:
    st.subheader(tab_label(sheet.name))
    if not sheet.records:
        st.info("No data available.")
        return
    st.dataframe(sheet.to_dataframe(), hide_index=True, use_container_width=True)


def _render_advice_panel(result: PlanResult) -> None:
    st.subheader("Ask FinPal")
    st.caption("Ask a question about this plan. Answers come from an AI model and may be inaccurate.")
    with st.form("advice_form"):
        question = st.text_area(
            "Your question",
            value=st.session_state.get("advice_question", ""),
            placeholder="How can I close my SIP gap faster?",
        )
        asked = st.form_submit_button("Get Advice")
    if asked:
        try:
            with st.spinner("FinPal is analysing your plan..."):
                answer = get_financial_advice(result, question)
        except AdviceError as exc:
            st.warning(str(exc))
        else:
            st.session_state["advice_question"] = question
            st.session_state["advice_answer"] = answer
    if st.session_state.get("advice_answer"):
        st.markdown(st.session_state["advice_answer"])


def render_results(result: PlanResult, *, exporter: SheetExporter | None = None) -> None:
    """Render the computed plan."""

    _render_toolbar(result, exporter or ExcelSheetExporter())

    tabs = result_tabs(result)
    if st.session_state.get("active_tab") not in tabs:
        st.session_state["active_tab"] = DASHBOARD_TAB
    selected = st.radio(
        "View",
        tabs,
        key="active_tab",
        horizontal=True,
        format_func=tab_label,
        label_visibility="collapsed",
    )

    if selected == DASHBOARD_TAB:
        render_metric_cards(plan_metric_cards(result.metrics), grid_aria_label="Plan summary")
        render_dashboard_charts(result.chart_data)
        render_recommendations(result.recommendations)
        st.divider()
        _render_advice_panel(result)
    else:
        _render_sheet(result.sheet(selected))


__all__ = ["render_results", "result_tabs", "tab_label"]
