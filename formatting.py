"""Helper utilities for formatting rupee amounts and percentages."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Tuple

RUPEE = "₹"
PLACEHOLDER = "—"

# Ordered largest first: (threshold, divisor, suffix, decimal places)
SHORT_UNITS: Tuple[Tuple[Decimal, Decimal, str, int], ...] = (
    (Decimal("10000000"), Decimal("10000000"), "Cr", 2),
    (Decimal("100000"), Decimal("100000"), "L", 2),
    (Decimal("1000"), Decimal("1000"), "k", 1),
)


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def round_rupees(value: object) -> Decimal:
    """Round to whole rupees, halves away from zero."""
    return to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def group_indian(digits: str) -> str:
    """Apply Indian digit grouping (12,34,567) to a string of digits."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_inr(value: object) -> str:
    """Format *value* as whole rupees, e.g. ``₹1,00,000`` or ``-₹2,500``."""
    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return PLACEHOLDER
    if amount.is_nan() or amount.is_infinite():
        return PLACEHOLDER
    rounded = amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{RUPEE}{group_indian(str(abs(int(rounded))))}"


def format_inr_short(value: object) -> str:
    """Compact chart-axis style: ``₹1.25Cr``, ``₹3.50L``, ``₹12.5k``, ``₹800``."""
    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return PLACEHOLDER
    if amount.is_nan() or amount.is_infinite():
        return PLACEHOLDER
    sign = "-" if amount < 0 else ""
    magnitude = abs(amount)
    for threshold, divisor, suffix, places in SHORT_UNITS:
        if magnitude >= threshold:
            scaled = (magnitude / divisor).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
            return f"{sign}{RUPEE}{scaled}{suffix}"
    rounded = round_rupees(magnitude)
    if rounded == 0:
        sign = ""
    return f"{sign}{RUPEE}{rounded}"


def format_percent(value: object) -> str:
    """Render a whole-number percentage such as ``55%``."""
    try:
        pct = to_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return PLACEHOLDER
    if pct.is_nan() or pct.is_infinite():
        return PLACEHOLDER
    if pct == pct.to_integral_value():
        return f"{int(pct)}%"
    return f"{pct.normalize()}%"


def format_months(value: int) -> str:
    return f"{value} month" if value == 1 else f"{value} months"


__all__ = [
    "PLACEHOLDER",
    "RUPEE",
    "SHORT_UNITS",
    "format_inr",
    "format_inr_short",
    "format_months",
    "format_percent",
    "group_indian",
    "round_rupees",
    "to_decimal",
]
