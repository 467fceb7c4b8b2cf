"""CLI for the hospitality staffing core.

Commands:
- bands: Show the configured revenue bands and their staffing thresholds
- recommend: Recommend staffing for a revenue forecast
- score: Calculate a weighted Hi Score for a team member
- employer-cost: Estimate employer costs (NI and pension) for a shift
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Protocol

import typer
from rich import print as rprint

from . import __version__
from .application.staffing_catalog import StaffingCatalog, resolve_staffing_catalog
from .application.staffing_plan import recommend_staffing
from .config import StaffingConfig
from .domain.employer_costs import (
    EmployerCostInput,
    EmploymentType,
    calculate_employer_costs,
    format_cost_breakdown,
)
from .domain.finance import format_currency
from .domain.hi_score import RoleType, calculate_weighted_score, get_empty_scores
from .domain.revenue_bands import format_revenue_band
from .domain.staff_summary import format_hi_score, summarise_band
from .exceptions import StaffingError
from .formatting import format_number
from .observability.logging import set_log_level
from .protocols import FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: StaffingConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: StaffingConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=self.config)

    def load_catalog(self) -> StaffingCatalog:
        deps = self.build_dependencies()
        return resolve_staffing_catalog(path=self.config.staffing_catalog_path, fs=deps.fs)


class ScoreOptionError(typer.BadParameter):
    """Raised when a --score value is not ``category=number``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Expected CATEGORY=NUMBER, got {value!r}.")


class UnknownCategoryError(typer.BadParameter):
    """Raised when a --score category does not belong to the chosen role."""

    def __init__(self, category: str, role: RoleType) -> None:
        super().__init__(f"{category!r} is not a {role.value} Hi Score category.")


class LogLevelError(typer.BadParameter):
    """Raised when --log-level or LOG_LEVEL names an unknown logging level."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Unknown log level {level!r}; use DEBUG, INFO, WARNING or ERROR.")


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__(
            "CLI context is not initialised. Use the hospitality-staffing entry point."
        )


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _parse_scores(values: list[str], role: RoleType) -> dict[str, float]:
    scores: dict[str, float] = dict(get_empty_scores(role))
    for value in values:
        category, sep, raw = value.partition("=")
        category = category.strip()
        if not sep or not category:
            raise ScoreOptionError(value)
        if category not in scores:
            raise UnknownCategoryError(category, role)
        try:
            scores[category] = float(raw)
        except ValueError as exc:
            raise ScoreOptionError(value) from exc
    return scores


def _fail(exc: StaffingError) -> typer.Exit:
    rprint(f"[red]✗ {exc}[/red]")
    return typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"hospitality-staffing {__version__}")
        raise typer.Exit()


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Hospitality staffing: revenue bands → staffing, Hi Scores, employer costs",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        catalog: Annotated[
            str | None,
            typer.Option(
                "--config",
                "-c",
                help="Staffing catalogue JSON (overrides STAFFING_CATALOG_PATH)",
            ),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Logging level (overrides LOG_LEVEL)"),
        ] = None,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the package version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        config = StaffingConfig.from_env().with_overrides(
            staffing_catalog_path=catalog,
            log_level=log_level,
        )
        try:
            set_log_level(config.log_level)
        except ValueError as exc:
            raise LogLevelError(config.log_level) from exc
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def bands(ctx: typer.Context) -> None:
        """Show revenue bands with their staffing thresholds."""
        state = _get_context(ctx)
        try:
            catalog = state.load_catalog()
        except StaffingError as exc:
            raise _fail(exc) from exc

        rprint(f"[bold]{len(catalog.revenue_bands)} revenue bands[/bold]")
        for band in catalog.revenue_bands:
            rprint(
                f"{band.name} ({format_revenue_band(band.revenue_min, band.revenue_max)}), "
                f"target {format_number(band.target_cost_percentage)}%"
            )
            rprint(f"  {summarise_band(band)}")

    @app.command()
    def recommend(
        ctx: typer.Context,
        revenue: Annotated[float, typer.Argument(help="Forecast revenue for the day (£)")],
    ) -> None:
        """Recommend staffing for a day's revenue forecast."""
        state = _get_context(ctx)
        try:
            catalog = state.load_catalog()
            result = recommend_staffing(revenue, catalog.revenue_bands)
        except StaffingError as exc:
            raise _fail(exc) from exc

        marker = "[green]✓[/green]" if result.exact_match else "[yellow]≈[/yellow]"
        rprint(f"{marker} {result.band.name} ({result.band_label})")
        rprint(f"  {result.staff_summary}")
        rprint(f"  Target labour cost: {format_currency(result.target_labour_cost)}")

    @app.command()
    def score(
        ctx: typer.Context,
        role: Annotated[RoleType, typer.Argument(help="Role family")],
        scores: Annotated[
            list[str] | None,
            typer.Option("--score", "-s", help="Category score as CATEGORY=NUMBER (repeatable)"),
        ] = None,
    ) -> None:
        """Calculate a weighted Hi Score; unspecified categories score 0."""
        state = _get_context(ctx)
        parsed = _parse_scores(scores or [], role)
        try:
            catalog = state.load_catalog()
            result = calculate_weighted_score(parsed, catalog.weights_for(role))
        except StaffingError as exc:
            raise _fail(exc) from exc
        rprint(f"[green]✓ Hi Score ({role.value}):[/green] {format_hi_score(result)}")

    @app.command(name="employer-cost")
    def employer_cost(
        ctx: typer.Context,
        rate: Annotated[float, typer.Option("--rate", help="Hourly rate (£)")] = 0.0,
        hours: Annotated[float, typer.Option("--hours", help="Hours worked")] = 0.0,
        employment_type: Annotated[
            EmploymentType,
            typer.Option("--type", help="Employment type"),
        ] = EmploymentType.HOURLY,
        salary: Annotated[
            float | None,
            typer.Option("--salary", help="Annual salary (£) for salaried staff"),
        ] = None,
        student: Annotated[
            bool,
            typer.Option("--student", help="Full-time student (no NI or pension)"),
        ] = False,
    ) -> None:
        """Estimate basic pay, employer NI and pension for a shift."""
        state = _get_context(ctx)
        try:
            costs = calculate_employer_costs(
                EmployerCostInput(
                    hourly_rate=rate,
                    hours=hours,
                    employment_type=employment_type,
                    is_full_time_student=student,
                    annual_salary=salary,
                ),
                state.config.cost_rates(),
            )
        except StaffingError as exc:
            raise _fail(exc) from exc
        rprint(format_cost_breakdown(costs))

    _ = (main, bands, recommend, score, employer_cost)

    return app
