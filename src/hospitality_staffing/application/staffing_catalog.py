"""Loading and strict validation for staffing catalogues (revenue bands + Hi Score weights)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from ..domain.hi_score import RoleType, score_categories, weights_for_role
from ..domain.revenue_bands import RevenueBand, get_default_revenue_bands
from ..exceptions import StaffingCatalogFileNotFoundError, StaffingCatalogValidationError
from ..protocols import FileSystem

_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class StaffingCatalog:
    """Revenue bands and per-role Hi Score weights for one venue."""

    revenue_bands: tuple[RevenueBand, ...]
    weights: MappingProxyType[RoleType, MappingProxyType[str, float]]

    def weights_for(self, role: RoleType) -> MappingProxyType[str, float]:
        return self.weights[RoleType(role)]


class _RevenueBandModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    revenue_min: float
    revenue_max: float
    foh_min_staff: int
    foh_max_staff: int
    kitchen_min_staff: int
    kitchen_max_staff: int
    kp_min_staff: int
    kp_max_staff: int
    target_cost_percentage: float

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError
        return text

    @field_validator(
        "foh_min_staff",
        "foh_max_staff",
        "kitchen_min_staff",
        "kitchen_max_staff",
        "kp_min_staff",
        "kp_max_staff",
    )
    @classmethod
    def _validate_staff_count(cls, value: int) -> int:
        if value < 0:
            raise ValueError
        return value

    @field_validator("target_cost_percentage")
    @classmethod
    def _validate_percentage(cls, value: float) -> float:
        if value < 0.0 or value > 100.0:
            raise ValueError
        return value

    @model_validator(mode="after")
    def _validate_ranges(self) -> _RevenueBandModel:
        if self.revenue_min >= self.revenue_max:
            raise ValueError
        if self.foh_min_staff > self.foh_max_staff:
            raise ValueError
        if self.kitchen_min_staff > self.kitchen_max_staff:
            raise ValueError
        if self.kp_min_staff > self.kp_max_staff:
            raise ValueError
        return self


class _StaffingCatalogModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    revenue_bands: tuple[_RevenueBandModel, ...]
    weights: dict[RoleType, dict[str, float]] = {}

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError
        return value

    @field_validator("weights")
    @classmethod
    def _validate_weights(
        cls, value: dict[RoleType, dict[str, float]]
    ) -> dict[RoleType, dict[str, float]]:
        for role, table in value.items():
            if set(table) != set(score_categories(role)):
                raise ValueError
            if any(weight < 0.0 for weight in table.values()):
                raise ValueError
            if sum(table.values()) <= 0.0:
                raise ValueError
        return value

    @model_validator(mode="after")
    def _validate_bands(self) -> _StaffingCatalogModel:
        if not self.revenue_bands:
            raise ValueError
        names = [band.name for band in self.revenue_bands]
        if len(set(names)) != len(names):
            raise ValueError
        ordered = sorted(self.revenue_bands, key=lambda band: band.revenue_min)
        for lower, upper in zip(ordered, ordered[1:], strict=False):
            if upper.revenue_min <= lower.revenue_max:
                raise ValueError
        return self


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",))) or "<root>"
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def _to_readonly_weights(values: Mapping[str, float]) -> MappingProxyType[str, float]:
    return MappingProxyType(dict(values))


def _to_domain_band(model: _RevenueBandModel) -> RevenueBand:
    return RevenueBand(
        name=model.name,
        revenue_min=model.revenue_min,
        revenue_max=model.revenue_max,
        foh_min_staff=model.foh_min_staff,
        foh_max_staff=model.foh_max_staff,
        kitchen_min_staff=model.kitchen_min_staff,
        kitchen_max_staff=model.kitchen_max_staff,
        kp_min_staff=model.kp_min_staff,
        kp_max_staff=model.kp_max_staff,
        target_cost_percentage=model.target_cost_percentage,
    )


def _resolve_weights(
    configured: Mapping[RoleType, Mapping[str, float]],
) -> MappingProxyType[RoleType, MappingProxyType[str, float]]:
    return MappingProxyType(
        {
            role: _to_readonly_weights(configured[role])
            if role in configured
            else weights_for_role(role)
            for role in RoleType
        }
    )


def default_staffing_catalog() -> StaffingCatalog:
    """Catalogue built from the default revenue bands and built-in weight tables."""
    return StaffingCatalog(
        revenue_bands=tuple(get_default_revenue_bands()),
        weights=_resolve_weights({}),
    )


def load_staffing_catalog(*, path: Path, fs: FileSystem) -> StaffingCatalog:
    """Load and validate a staffing catalogue from JSON."""
    if not fs.exists(path):
        raise StaffingCatalogFileNotFoundError(str(path))

    payload = fs.read_text(path)
    try:
        model = _StaffingCatalogModel.model_validate_json(payload)
    except ValidationError as exc:
        raise StaffingCatalogValidationError(str(path), _format_validation_error(exc)) from exc

    return StaffingCatalog(
        revenue_bands=tuple(
            _to_domain_band(band)
            for band in sorted(model.revenue_bands, key=lambda band: band.revenue_min)
        ),
        weights=_resolve_weights(model.weights),
    )


def resolve_staffing_catalog(*, path: str, fs: FileSystem) -> StaffingCatalog:
    """Load the catalogue at ``path``, or the defaults when no path is configured."""
    if not path.strip():
        return default_staffing_catalog()
    return load_staffing_catalog(path=Path(path.strip()), fs=fs)
