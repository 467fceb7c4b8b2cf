"""Employer cost estimates for rota shifts (basic pay, National Insurance, pension).

Usage example:
    from hospitality_staffing.domain.employer_costs import (
        EmployerCostInput,
        EmploymentType,
        calculate_employer_costs,
        format_cost_breakdown,
    )

    costs = calculate_employer_costs(
        EmployerCostInput(hourly_rate=12.0, hours=20, employment_type=EmploymentType.HOURLY)
    )
    print(format_cost_breakdown(costs))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..exceptions import EmployerCostError
from ..formatting import format_fixed


class EmploymentType(StrEnum):
    """How a team member is employed."""

    HOURLY = "hourly"
    SALARIED = "salaried"
    CONTRACTOR = "contractor"


@dataclass(frozen=True)
class EmployerCostRates:
    """UK employer cost constants applied to a shift's basic pay."""

    weekly_ni_threshold: float = 175.0
    ni_rate: float = 0.138
    pension_rate: float = 0.03
    working_days_per_year: int = 261  # 365 days less two days off per week


DEFAULT_RATES = EmployerCostRates()


@dataclass(frozen=True)
class EmployerCostInput:
    """Inputs for one employer cost calculation."""

    hourly_rate: float
    hours: float
    employment_type: EmploymentType
    is_full_time_student: bool = False
    annual_salary: float | None = None


@dataclass(frozen=True)
class EmployerCosts:
    """Employer cost breakdown in pounds."""

    basic_pay: float
    ni_cost: float
    pension_cost: float
    total_cost: float


def _check_working_days(rates: EmployerCostRates) -> None:
    if rates.working_days_per_year <= 0:
        raise EmployerCostError("working_days_per_year must be positive")


def calculate_employer_costs(
    cost_input: EmployerCostInput,
    rates: EmployerCostRates = DEFAULT_RATES,
) -> EmployerCosts:
    """Calculate basic pay plus employer NI and pension contributions.

    Salaried staff with an annual salary are costed at one working day's pay;
    everyone else is hourly rate times hours. Contractors and full-time
    students attract no NI or pension.
    """
    employment_type = EmploymentType(cost_input.employment_type)
    if employment_type is EmploymentType.SALARIED and cost_input.annual_salary:
        _check_working_days(rates)
        basic_pay = cost_input.annual_salary / rates.working_days_per_year
    else:
        basic_pay = cost_input.hourly_rate * cost_input.hours

    ni_cost = 0.0
    pension_cost = 0.0
    if employment_type is not EmploymentType.CONTRACTOR and not cost_input.is_full_time_student:
        if basic_pay > rates.weekly_ni_threshold:
            ni_cost = (basic_pay - rates.weekly_ni_threshold) * rates.ni_rate
        pension_cost = basic_pay * rates.pension_rate

    return EmployerCosts(
        basic_pay=basic_pay,
        ni_cost=ni_cost,
        pension_cost=pension_cost,
        total_cost=basic_pay + ni_cost + pension_cost,
    )


def calculate_hourly_rate_from_salary(
    annual_salary: float,
    hours_per_day: float = 8,
    rates: EmployerCostRates = DEFAULT_RATES,
) -> float:
    """Convert an annual salary into an hourly rate over the working year."""
    _check_working_days(rates)
    if hours_per_day <= 0:
        raise EmployerCostError("hours_per_day must be positive")
    daily_rate = annual_salary / rates.working_days_per_year
    return daily_rate / hours_per_day


def format_cost_breakdown(costs: EmployerCosts) -> str:
    """Render a cost breakdown as four ``Label: £x.xx`` lines."""
    return "\n".join(
        (
            f"Basic Pay: £{format_fixed(costs.basic_pay, 2)}",
            f"NI: £{format_fixed(costs.ni_cost, 2)}",
            f"Pension: £{format_fixed(costs.pension_cost, 2)}",
            f"Total: £{format_fixed(costs.total_cost, 2)}",
        )
    )
