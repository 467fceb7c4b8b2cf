"""Display strings for staffing thresholds and staff profiles."""

from __future__ import annotations

from ..formatting import Number, format_fixed, format_number
from .revenue_bands import RevenueBand


def get_staff_summary(
    foh_min: Number,
    foh_max: Number,
    kitchen_min: Number,
    kitchen_max: Number,
    kp_min: Number,
    kp_max: Number,
) -> str:
    """Build a one-line staffing summary from threshold values.

    Min/max ordering is the caller's responsibility and is not checked.
    """
    return (
        f"FOH: {format_number(foh_min)}-{format_number(foh_max)}, "
        f"Kitchen: {format_number(kitchen_min)}-{format_number(kitchen_max)}, "
        f"KP: {format_number(kp_min)}-{format_number(kp_max)}"
    )


def summarise_band(band: RevenueBand) -> str:
    """Staffing summary for a single revenue band."""
    return get_staff_summary(
        band.foh_min_staff,
        band.foh_max_staff,
        band.kitchen_min_staff,
        band.kitchen_max_staff,
        band.kp_min_staff,
        band.kp_max_staff,
    )


def format_hi_score(score: Number | None) -> str:
    """Format a Hi Score to one decimal place, or ``N/A`` when there is none."""
    if score is None:
        return "N/A"
    return format_fixed(score, 1)


def get_initials(first_name: str | None, last_name: str | None) -> str:
    """Upper-case initials from a first and last name; missing parts are skipped."""
    return f"{(first_name or '')[:1]}{(last_name or '')[:1]}".upper()
