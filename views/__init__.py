"""Page views for the planner."""

from .form import render_plan_form
from .results import render_results

__all__ = ["render_plan_form", "render_results"]
