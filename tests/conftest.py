"""Test configuration for ensuring direct module imports succeed."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the project root (containing modules like `calc`, `models`, `services`) is available on
# the Python import path when running tests with the default ``pytest`` command.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)
if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)

from models import DEFAULT_PLAN_INPUT, PlanInput  # noqa: E402


@pytest.fixture
def default_plan() -> PlanInput:
    return DEFAULT_PLAN_INPUT


@pytest.fixture
def make_plan():
    def _make(**changes: object) -> PlanInput:
        return PlanInput(**{**DEFAULT_PLAN_INPUT.model_dump(), **changes})

    return _make
