"""Utilities for managing Streamlit session state defaults and resets."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple

import streamlit as st
from pydantic import ValidationError

from models import DEFAULT_PLAN_INPUT, PlanInput, PlanResult

StateFactory = Callable[[], Any]
TypeHint = type | tuple[type, ...] | None

DASHBOARD_TAB = "Dashboard"
FORM_WIDGET_PREFIX = "form_"


@dataclass(frozen=True)
class StateSpec:
    """Definition of a session state entry."""

    default_factory: StateFactory
    type_hint: TypeHint
    description: str

    def create_default(self) -> Any:
        """Return a new default value for the state entry."""
        return self.default_factory()

    def is_valid(self, value: Any) -> bool:
        """Check whether *value* matches the declared type hint."""
        if self.type_hint is None:
            return True
        hints = self.type_hint if isinstance(self.type_hint, tuple) else (self.type_hint,)
        return isinstance(value, hints)


STATE_SPECS: Dict[str, StateSpec] = {
    "plan_form": StateSpec(DEFAULT_PLAN_INPUT.to_form_values, dict, "Raw planning form values"),
    "plan_result": StateSpec(lambda: None, (PlanResult, type(None)), "Last computed plan"),
    "active_tab": StateSpec(lambda: DASHBOARD_TAB, str, "Selected results tab"),
    "advice_question": StateSpec(lambda: "", str, "Question sent to the advisor"),
    "advice_answer": StateSpec(lambda: "", str, "Advisor reply for the current plan"),
}


def ensure_session_defaults(overrides: Mapping[str, Any] | None = None) -> None:
    """Populate :mod:`st.session_state` with defaults and type-validate entries."""

    overrides = overrides or {}
    for key, spec in STATE_SPECS.items():
        if key in overrides:
            st.session_state[key] = overrides[key]
            continue
        if key not in st.session_state or not spec.is_valid(st.session_state[key]):
            st.session_state[key] = spec.create_default()


def reset_session_keys(keys: Iterable[str] | None = None) -> None:
    """Reset selected state keys to their default values."""

    target_keys = list(keys) if keys is not None else list(STATE_SPECS.keys())
    for key in target_keys:
        if key in STATE_SPECS:
            st.session_state[key] = STATE_SPECS[key].create_default()
        elif key in st.session_state:
            del st.session_state[key]


def reset_plan_state() -> None:
    """Start over: default form values, no result, no advice."""

    reset_session_keys()
    for key in [key for key in st.session_state.keys() if str(key).startswith(FORM_WIDGET_PREFIX)]:
        del st.session_state[key]


def store_plan(plan: PlanInput, result: PlanResult) -> None:
    """Keep the submitted form values and a fresh result; clear stale advice."""

    st.session_state["plan_form"] = plan.to_form_values()
    st.session_state["plan_result"] = result
    st.session_state["active_tab"] = DASHBOARD_TAB
    st.session_state["advice_question"] = ""
    st.session_state["advice_answer"] = ""


def load_plan_input() -> Tuple[PlanInput, bool]:
    """Return the plan input from session form values or the defaults.

    Returns ``(plan, is_custom)`` where *is_custom* is ``False`` when the
    stored values were missing or unusable and the defaults were used.
    """

    form_values = st.session_state.get("plan_form")
    if isinstance(form_values, dict) and form_values:
        try:
            return PlanInput(**form_values), True
        except ValidationError:
            pass
    return DEFAULT_PLAN_INPUT, False


__all__ = [
    "DASHBOARD_TAB",
    "FORM_WIDGET_PREFIX",
    "STATE_SPECS",
    "StateSpec",
    "ensure_session_defaults",
    "load_plan_input",
    "reset_plan_state",
    "reset_session_keys",
    "store_plan",
]
