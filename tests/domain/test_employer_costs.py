"""Tests for employer cost estimates."""

import pytest

from hospitality_staffing.domain.employer_costs import (
    EmployerCostInput,
    EmployerCostRates,
    EmployerCosts,
    EmploymentType,
    calculate_employer_costs,
    calculate_hourly_rate_from_salary,
    format_cost_breakdown,
)
from hospitality_staffing.exceptions import EmployerCostError


def test_hourly_below_ni_threshold_pays_pension_only() -> None:
    costs = calculate_employer_costs(
        EmployerCostInput(hourly_rate=10.0, hours=10, employment_type=EmploymentType.HOURLY)
    )

    assert costs.basic_pay == pytest.approx(100.0)
    assert costs.ni_cost == 0.0
    assert costs.pension_cost == pytest.approx(3.0)
    assert costs.total_cost == pytest.approx(103.0)


def test_hourly_above_ni_threshold_pays_ni_on_the_excess() -> None:
    costs = calculate_employer_costs(
        EmployerCostInput(hourly_rate=12.5, hours=20, employment_type=EmploymentType.HOURLY)
    )

    assert costs.basic_pay == pytest.approx(250.0)
    assert costs.ni_cost == pytest.approx((250.0 - 175.0) * 0.138)
    assert costs.pension_cost == pytest.approx(7.5)
    assert costs.total_cost == pytest.approx(250.0 + 10.35 + 7.5)


def test_contractor_has_no_ni_or_pension() -> None:
    costs = calculate_employer_costs(
        EmployerCostInput(hourly_rate=20.0, hours=40, employment_type=EmploymentType.CONTRACTOR)
    )

    assert costs == EmployerCosts(basic_pay=800.0, ni_cost=0.0, pension_cost=0.0, total_cost=800.0)


def test_full_time_student_has_no_ni_or_pension() -> None:
    costs = calculate_employer_costs(
        EmployerCostInput(
            hourly_rate=11.0,
            hours=30,
            employment_type=EmploymentType.HOURLY,
            is_full_time_student=True,
        )
    )

    assert costs.ni_cost == 0.0
    assert costs.pension_cost == 0.0
    assert costs.total_cost == pytest.approx(330.0)


def test_salaried_costs_one_working_day() -> None:
    costs = calculate_employer_costs(
        EmployerCostInput(
            hourly_rate=0.0,
            hours=8,
            employment_type=EmploymentType.SALARIED,
            annual_salary=52200.0,
        )
    )

    assert costs.basic_pay == pytest.approx(200.0)
    assert costs.ni_cost == pytest.approx(25.0 * 0.138)
    assert costs.pension_cost == pytest.approx(6.0)


def test_salaried_without_salary_falls_back_to_hourly_pay() -> None:
    costs = calculate_employer_costs(
        EmployerCostInput(hourly_rate=15.0, hours=4, employment_type=EmploymentType.SALARIED)
    )

    assert costs.basic_pay == pytest.approx(60.0)


def test_custom_rates_are_applied() -> None:
    rates = EmployerCostRates(weekly_ni_threshold=100.0, ni_rate=0.15, pension_rate=0.05)

    costs = calculate_employer_costs(
        EmployerCostInput(hourly_rate=20.0, hours=10, employment_type=EmploymentType("hourly")),
        rates,
    )

    assert costs.ni_cost == pytest.approx(15.0)
    assert costs.pension_cost == pytest.approx(10.0)


def test_unknown_employment_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        calculate_employer_costs(
            EmployerCostInput(
                hourly_rate=1.0, hours=1, employment_type="casual"  # type: ignore[arg-type]
            )
        )


def test_calculate_hourly_rate_from_salary() -> None:
    assert calculate_hourly_rate_from_salary(52200.0) == pytest.approx(25.0)
    assert calculate_hourly_rate_from_salary(52200.0, hours_per_day=10) == pytest.approx(20.0)


def test_calculate_hourly_rate_rejects_non_positive_hours() -> None:
    with pytest.raises(EmployerCostError):
        calculate_hourly_rate_from_salary(30000.0, hours_per_day=0)


def test_zero_working_days_is_rejected() -> None:
    rates = EmployerCostRates(working_days_per_year=0)

    with pytest.raises(EmployerCostError):
        calculate_hourly_rate_from_salary(30000.0, rates=rates)


def test_format_cost_breakdown_renders_pounds_and_pence() -> None:
    costs = EmployerCosts(basic_pay=250.0, ni_cost=10.35, pension_cost=7.5, total_cost=267.85)

    assert format_cost_breakdown(costs) == (
        "Basic Pay: £250.00\nNI: £10.35\nPension: £7.50\nTotal: £267.85"
    )
