"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from .cli import CliDependencies, create_app
from .config import StaffingConfig
from .infrastructure import LocalFileSystem


def build_cli_dependencies(*, config: StaffingConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands.

    Args:
        config: Staffing configuration (unused by the local filesystem wiring).
    """
    _ = config
    return CliDependencies(fs=LocalFileSystem())


app = create_app(build_cli_dependencies)
