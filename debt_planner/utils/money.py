"""Monetary rounding and boundary parsing utilities"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any

CENT = Decimal("0.01")


def round_cents(value: float) -> float:
    """Round to cent precision, halves away from zero (1.005 -> 1.01); inf/nan pass through"""
    if not math.isfinite(value):
        return float(value)
    return float(Decimal(repr(float(value))).quantize(CENT, rounding=ROUND_HALF_UP))


def coerce_amount(value: Any, default: float = 0.0) -> float:
    """
    Parse a loosely typed numeric input into a finite float.

    Accepts ints, floats and numeric strings ("12.5", " 100 "). Anything else,
    including NaN and infinities, yields `default`.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default
