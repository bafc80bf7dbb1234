"""Numeric classification of cell text.

``parse_numeric`` is the single place where cell text becomes a number.
It understands the formatting people type into document tables:

- currency symbols: ``$100``, ``€ 5``
- thousands separators: ``1,200.50``
- percentages: ``50%`` -> 0.5
- accounting negatives: ``(500)`` -> -500
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

_STRIP_PATTERN = re.compile(r"[$€£¥,\s]")
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_CENTS = Decimal("0.01")


def parse_numeric(text: Any) -> float | None:
    """Parse cell text into a number, or None if the text is not numeric.

    Examples:
        "$1,200.50" -> 1200.5, "50%" -> 0.5, "(500)" -> -500.0,
        "10kg" -> 10.0, "" -> None, "abc" -> None
    """
    if text is None:
        return None
    clean = str(text).strip()
    if not clean:
        return None

    is_percent = clean.endswith("%")
    if is_percent:
        clean = clean[:-1]

    clean = _STRIP_PATTERN.sub("", clean)

    # Accounting notation for negatives
    if clean.startswith("(") and clean.endswith(")"):
        clean = "-" + clean[1:-1]

    # Leading number only: "12 apples" reads as 12
    match = _LEADING_NUMBER.match(clean)
    if not match:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None

    return value / 100 if is_percent else value


def format_number(value: float) -> float | int:
    """Return integral floats as int so 25.0 displays as 25."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def round_result(value: float) -> float | int:
    """Round a computed result for display.

    Integral values are kept exact; anything else is rounded half-up to
    two decimal places (1.125 -> 1.13).
    """
    if float(value).is_integer():
        return int(value)
    rounded = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return format_number(float(rounded))
