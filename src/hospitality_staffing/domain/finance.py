"""Gross profit and currency helpers for P&L views."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from ..formatting import Number


def calculate_gross_profit(revenue: Number, costs: Number) -> float:
    """Gross profit as a fraction of revenue (0.25 means 25%); 0 when revenue is 0."""
    if not revenue:
        return 0.0
    return (revenue - costs) / revenue


def calculate_weekly_gp(
    weekly_revenue: Sequence[Number], weekly_costs: Sequence[Number]
) -> list[float]:
    """Gross profit per week, pairing weeks by position; missing cost weeks count as 0."""
    return [
        calculate_gross_profit(revenue, weekly_costs[index] if index < len(weekly_costs) else 0)
        for index, revenue in enumerate(weekly_revenue)
    ]


def format_currency(amount: Number | None) -> str:
    """Format a whole-pound GBP amount, e.g. ``£1,235`` or ``-£50``."""
    if amount is None:
        return "£0"
    rounded = Decimal(repr(float(amount))).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}£{abs(rounded):,.0f}"
