"""Domain modules for staffing thresholds and staff scoring."""

from .hi_score import (
    FOH_WEIGHTS,
    KITCHEN_WEIGHTS,
    RoleType,
    calculate_weighted_score,
    get_empty_scores,
)
from .revenue_bands import RevenueBand, format_revenue_band, get_default_revenue_bands
from .staff_summary import get_staff_summary

__all__ = [
    "FOH_WEIGHTS",
    "KITCHEN_WEIGHTS",
    "RevenueBand",
    "RoleType",
    "calculate_weighted_score",
    "format_revenue_band",
    "get_default_revenue_bands",
    "get_empty_scores",
    "get_staff_summary",
]
