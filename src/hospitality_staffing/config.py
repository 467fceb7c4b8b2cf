"""Centralised, injectable configuration for the hospitality staffing core."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .domain.employer_costs import EmployerCostRates


class PositiveNumberEnvVarError(ValueError):
    """Raised when an environment variable must be a positive number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive number.")


@dataclass(frozen=True)
class StaffingConfig:
    """Immutable configuration for staffing calculations.

    Load from environment with `StaffingConfig.from_env()` or construct directly for testing.
    """

    # Revenue bands and Hi Score weights; empty means the built-in defaults
    staffing_catalog_path: str = ""

    # Employer costs
    weekly_ni_threshold: float = 175.0
    employer_ni_rate: float = 0.138
    employer_pension_rate: float = 0.03
    working_days_per_year: int = 261

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            StaffingConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            staffing_catalog_path=os.getenv("STAFFING_CATALOG_PATH", "").strip(),
            weekly_ni_threshold=_parse_positive_float(
                os.getenv("WEEKLY_NI_THRESHOLD", "175"), env_name="WEEKLY_NI_THRESHOLD"
            ),
            employer_ni_rate=_parse_positive_float(
                os.getenv("EMPLOYER_NI_RATE", "0.138"), env_name="EMPLOYER_NI_RATE"
            ),
            employer_pension_rate=_parse_positive_float(
                os.getenv("EMPLOYER_PENSION_RATE", "0.03"), env_name="EMPLOYER_PENSION_RATE"
            ),
            working_days_per_year=_parse_positive_int(
                os.getenv("WORKING_DAYS_PER_YEAR", "261"), env_name="WORKING_DAYS_PER_YEAR"
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )

    def with_overrides(
        self,
        *,
        staffing_catalog_path: str | None = None,
        log_level: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            staffing_catalog_path=self.staffing_catalog_path
            if staffing_catalog_path is None
            else staffing_catalog_path.strip(),
            log_level=self.log_level if log_level is None else log_level.strip().upper(),
        )

    def cost_rates(self) -> EmployerCostRates:
        """Employer cost constants derived from this configuration."""
        return EmployerCostRates(
            weekly_ni_threshold=self.weekly_ni_threshold,
            ni_rate=self.employer_ni_rate,
            pension_rate=self.employer_pension_rate,
            working_days_per_year=self.working_days_per_year,
        )


def _parse_positive_float(value: str, *, env_name: str) -> float:
    """Parse a positive float from an environment variable."""
    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise PositiveNumberEnvVarError(env_name) from exc
    if parsed <= 0:
        raise PositiveNumberEnvVarError(env_name)
    return parsed


def _parse_positive_int(value: str, *, env_name: str) -> int:
    """Parse a positive integer from an environment variable."""
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise PositiveNumberEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveNumberEnvVarError(env_name)
    return parsed
