"""Conversion between fractional amounts and fixed-point integers.

Balances are kept as signed integers in units of 1/10,000 so that
arithmetic stays exact with four decimal places of precision.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

SCALE = 10_000

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def fractional_to_number(value: float) -> int:
    """Convert a fractional amount to an integer with four decimals of precision.

    Ties round away from zero. NaN becomes 0 and results outside the signed
    64-bit range saturate at its limits.
    """
    scaled = float(value) * float(SCALE)
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return _I64_MAX if scaled > 0 else _I64_MIN
    rounded = int(Decimal(scaled).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return max(_I64_MIN, min(_I64_MAX, rounded))


def number_to_fractional(value: int) -> float:
    """Convert a fixed-point integer back to a fractional amount."""
    return value / SCALE