"""Validation helpers for user supplied planning inputs."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Tuple

from pydantic import ValidationError

from models import MONEY_FIELDS, MONTH_FIELDS, PERCENT_FIELDS, PlanInput

MAX_PERCENT = Decimal("100")


@dataclass(frozen=True)
class ValidationIssue:
    """Represents a validation error for a specific field."""

    field: str
    message: str


def _issues_from_error(error: ValidationError) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for detail in error.errors():
        path = ".".join(str(part) for part in detail.get("loc", ()))
        message = detail.get("msg", "Invalid value.")
        issues.append(ValidationIssue(field=path or "plan", message=message))
    return issues


def check_ranges(plan: PlanInput) -> List[ValidationIssue]:
    """Range rules the calculator itself tolerates but the form should not."""

    issues: List[ValidationIssue] = []
    for name in MONEY_FIELDS:
        if getattr(plan, name) < 0:
            issues.append(ValidationIssue(name, "Amount cannot be negative."))
    for name in PERCENT_FIELDS:
        value = getattr(plan, name)
        if value < 0 or value > MAX_PERCENT:
            issues.append(ValidationIssue(name, "Percentage must be between 0 and 100."))
    for name in MONTH_FIELDS:
        if getattr(plan, name) < 1:
            issues.append(ValidationIssue(name, "Enter at least 1 month."))
    return issues


def validate_plan_input(data: Mapping[str, Any]) -> Tuple[PlanInput | None, List[ValidationIssue]]:
    try:
        plan = PlanInput(**dict(data))
    except ValidationError as exc:
        return None, _issues_from_error(exc)
    issues = check_ranges(plan)
    if issues:
        return None, issues
    return plan, []


def collect_error_messages(issues: Iterable[ValidationIssue]) -> str:
    return "\n".join(f"[{issue.field}] {issue.message}" for issue in issues)


__all__ = [
    "ValidationIssue",
    "check_ranges",
    "collect_error_messages",
    "validate_plan_input",
]
