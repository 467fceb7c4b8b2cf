"""Revenue bands and the staffing thresholds attached to them.

Usage example:
    from hospitality_staffing.domain.revenue_bands import (
        find_revenue_band,
        format_revenue_band,
        get_default_revenue_bands,
    )

    bands = get_default_revenue_bands()
    band = find_revenue_band(1500, bands)
    assert band is not None
    assert format_revenue_band(band.revenue_min, band.revenue_max) == "£1001 - £2000"
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..exceptions import RevenueBandError
from ..formatting import Number, format_number


@dataclass(frozen=True)
class RevenueBand:
    """A revenue range with recommended staffing counts and a target cost percentage."""

    name: str
    revenue_min: Number
    revenue_max: Number
    foh_min_staff: int
    foh_max_staff: int
    kitchen_min_staff: int
    kitchen_max_staff: int
    kp_min_staff: int
    kp_max_staff: int
    target_cost_percentage: Number


# (name, revenue min, revenue max, FOH min/max, kitchen min/max, KP min/max, target %)
_DEFAULT_BANDS: tuple[tuple[str, int, int, int, int, int, int, int, int, int], ...] = (
    ("Very Low Revenue", 0, 500, 1, 2, 1, 1, 0, 1, 35),
    ("Low Revenue", 501, 1000, 2, 3, 1, 2, 0, 1, 32),
    ("Medium Revenue", 1001, 2000, 3, 4, 2, 3, 1, 1, 28),
    ("High Revenue", 2001, 3500, 4, 6, 3, 4, 1, 2, 25),
    ("Very High Revenue", 3501, 10000, 6, 8, 4, 6, 1, 2, 22),
)


def get_default_revenue_bands() -> list[RevenueBand]:
    """Return the default revenue bands used to seed staffing thresholds.

    A new list is built on every call, so callers may reorder or replace
    entries without affecting later calls.
    """
    return [
        RevenueBand(
            name=name,
            revenue_min=revenue_min,
            revenue_max=revenue_max,
            foh_min_staff=foh_min,
            foh_max_staff=foh_max,
            kitchen_min_staff=kitchen_min,
            kitchen_max_staff=kitchen_max,
            kp_min_staff=kp_min,
            kp_max_staff=kp_max,
            target_cost_percentage=target,
        )
        for (
            name,
            revenue_min,
            revenue_max,
            foh_min,
            foh_max,
            kitchen_min,
            kitchen_max,
            kp_min,
            kp_max,
            target,
        ) in _DEFAULT_BANDS
    ]


def format_revenue_band(revenue_min: Number, revenue_max: Number) -> str:
    """Format a revenue range for display, e.g. ``£500 - £1000``."""
    return f"£{format_number(revenue_min)} - £{format_number(revenue_max)}"


def validate_revenue_band(band: RevenueBand) -> None:
    """Raise ``RevenueBandError`` if a single band breaks its invariants."""
    if not band.name.strip():
        raise RevenueBandError("band name must not be empty")
    if band.revenue_min >= band.revenue_max:
        raise RevenueBandError(f"{band.name}: revenue_min must be below revenue_max")
    pairs = (
        ("foh", band.foh_min_staff, band.foh_max_staff),
        ("kitchen", band.kitchen_min_staff, band.kitchen_max_staff),
        ("kp", band.kp_min_staff, band.kp_max_staff),
    )
    for label, low, high in pairs:
        if low < 0 or high < 0:
            raise RevenueBandError(f"{band.name}: {label} staff counts must be non-negative")
        if low > high:
            raise RevenueBandError(f"{band.name}: {label} min staff exceeds max staff")
    if not 0 <= band.target_cost_percentage <= 100:
        raise RevenueBandError(f"{band.name}: target_cost_percentage must be within 0-100")


def validate_revenue_bands(bands: Sequence[RevenueBand]) -> None:
    """Validate every band and check the ordered table has no overlaps."""
    for band in bands:
        validate_revenue_band(band)
    ordered = sorted(bands, key=lambda band: band.revenue_min)
    for lower, upper in zip(ordered, ordered[1:], strict=False):
        if upper.revenue_min <= lower.revenue_max:
            raise RevenueBandError(f"{lower.name} overlaps {upper.name}")


def find_revenue_band(revenue: Number, bands: Sequence[RevenueBand]) -> RevenueBand | None:
    """Find the band covering ``revenue``, clamping to the nearest end of the table.

    Revenue below the lowest band resolves to the lowest band; anything else
    without an exact match (above the table or in a gap) resolves to the
    highest band. Returns ``None`` only when ``bands`` is empty.
    """
    ordered = sorted(bands, key=lambda band: band.revenue_min)
    if not ordered:
        return None
    for band in ordered:
        if band.revenue_min <= revenue <= band.revenue_max:
            return band
    if revenue < ordered[0].revenue_min:
        return ordered[0]
    return ordered[-1]


def is_exact_match(revenue: Number, band: RevenueBand) -> bool:
    """Return True when ``revenue`` falls inside ``band`` rather than being clamped to it."""
    return band.revenue_min <= revenue <= band.revenue_max
