"""Tests for gross profit and currency helpers."""

import pytest

from hospitality_staffing.domain.finance import (
    calculate_gross_profit,
    calculate_weekly_gp,
    format_currency,
)


def test_gross_profit_is_a_fraction_of_revenue() -> None:
    assert calculate_gross_profit(1000, 700) == pytest.approx(0.3)
    assert calculate_gross_profit(500, 600) == pytest.approx(-0.2)


def test_gross_profit_is_zero_without_revenue() -> None:
    assert calculate_gross_profit(0, 250) == 0.0


def test_weekly_gp_pairs_weeks_and_defaults_missing_costs() -> None:
    result = calculate_weekly_gp([1000, 2000, 400], [750, 1000])

    assert result == pytest.approx([0.25, 0.5, 1.0])


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (None, "£0"),
        (0, "£0"),
        (1234.5, "£1,235"),
        (999.49, "£999"),
        (1250000, "£1,250,000"),
        (-50.4, "-£50"),
    ],
)
def test_format_currency(amount: float | None, expected: str) -> None:
    assert format_currency(amount) == expected
