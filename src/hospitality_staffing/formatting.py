"""Number-to-text rendering shared by the display formatters.

Usage example:
    from hospitality_staffing.formatting import format_number, round_half_up

    assert format_number(500.0) == "500"
    assert format_number(12.5) == "12.5"
    assert round_half_up(2.675, 2) == 2.68
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

Number = int | float


def format_number(value: Number) -> str:
    """Render a number the way a plain string conversion would show it to a user.

    Integral values print without a decimal point, other values print their
    shortest round-trip form. No thousands separators are added.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def round_half_up(value: Number, places: int) -> float:
    """Round using half-up semantics on the decimal representation of ``value``."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def format_fixed(value: Number, places: int) -> str:
    """Render ``value`` with exactly ``places`` decimal places, rounding half-up."""
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"
