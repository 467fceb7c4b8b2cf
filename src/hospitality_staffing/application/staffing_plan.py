"""Turn revenue forecasts into staffing recommendations.

Usage example:
    from hospitality_staffing.application.staffing_plan import plan_week
    from hospitality_staffing.domain.revenue_bands import get_default_revenue_bands

    plan = plan_week({"2026-10-19": 1200, "2026-10-20": 0}, get_default_revenue_bands())
    for day, recommendation in plan.items():
        print(day, recommendation.staff_summary)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ..domain.revenue_bands import (
    RevenueBand,
    find_revenue_band,
    format_revenue_band,
    is_exact_match,
)
from ..domain.staff_summary import summarise_band
from ..exceptions import NoRevenueBandsError
from ..formatting import Number
from ..observability.logging import get_logger

logger = get_logger("hospitality_staffing.staffing_plan")


@dataclass(frozen=True)
class StaffingRecommendation:
    """Recommended staffing for a single revenue figure."""

    revenue: Number
    band: RevenueBand
    exact_match: bool
    band_label: str
    staff_summary: str
    target_labour_cost: float


def recommend_staffing(revenue: Number, bands: Sequence[RevenueBand]) -> StaffingRecommendation:
    """Recommend staffing for ``revenue`` from the configured revenue bands.

    Raises:
        NoRevenueBandsError: ``bands`` is empty.
    """
    band = find_revenue_band(revenue, bands)
    if band is None:
        raise NoRevenueBandsError()

    exact = is_exact_match(revenue, band)
    if exact:
        logger.info('Using band "%s" for revenue %s', band.name, revenue)
    else:
        logger.warning(
            'No band covers revenue %s; clamped to "%s" (%s)',
            revenue,
            band.name,
            format_revenue_band(band.revenue_min, band.revenue_max),
        )

    return StaffingRecommendation(
        revenue=revenue,
        band=band,
        exact_match=exact,
        band_label=format_revenue_band(band.revenue_min, band.revenue_max),
        staff_summary=summarise_band(band),
        target_labour_cost=revenue * band.target_cost_percentage / 100,
    )


def plan_week(
    forecast: Mapping[str, Number],
    bands: Sequence[RevenueBand],
) -> dict[str, StaffingRecommendation]:
    """Recommend staffing for each forecast day with positive revenue.

    Days with no revenue forecast are skipped.
    """
    if not bands:
        raise NoRevenueBandsError()

    plan: dict[str, StaffingRecommendation] = {}
    for day, revenue in forecast.items():
        if revenue <= 0:
            logger.debug("Skipping %s: no revenue forecast", day)
            continue
        plan[day] = recommend_staffing(revenue, bands)
    logger.info("Planned %s of %s forecast days", len(plan), len(forecast))
    return plan
