"""Custom exceptions for the hospitality staffing core.

These exceptions replace silent NaN or partial results with explicit failures
and enable testing of error paths.
"""

from __future__ import annotations

from collections.abc import Iterable


class StaffingError(Exception):
    """Base exception for all staffing core errors."""

    pass


class MissingWeightError(StaffingError):
    """Raised when a scored category has no weight in the weight table."""

    def __init__(self, categories: Iterable[str]) -> None:
        self.categories = tuple(sorted(categories))
        joined = ", ".join(self.categories)
        super().__init__(f"No weight configured for scored categories: {joined}")


class ZeroTotalWeightError(StaffingError):
    """Raised when a weight table sums to zero and no average can be taken."""

    def __init__(self) -> None:
        super().__init__("Weight table sums to zero; at least one weight must be positive.")


class RevenueBandError(StaffingError):
    """Raised when a revenue band or band table breaks its invariants."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid revenue band: {message}")


class NoRevenueBandsError(StaffingError):
    """Raised when a staffing recommendation is requested with no bands configured."""

    def __init__(self) -> None:
        super().__init__("No revenue bands are configured.")


class EmployerCostError(StaffingError):
    """Raised when employer cost inputs cannot produce a meaningful result."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Cannot calculate employer costs: {message}")


class StaffingCatalogFileNotFoundError(StaffingError):
    """Raised when the configured staffing catalogue file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Staffing catalogue not found: {path}")


class StaffingCatalogValidationError(StaffingError):
    """Raised when a staffing catalogue file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid staffing catalogue {path}: {detail}")
