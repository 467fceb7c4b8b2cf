"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces that staffing components depend on,
enabling isolated unit testing with in-memory implementations.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Abstract read access to configuration files."""

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        ...

    def exists(self, path: Path) -> bool:
        """Return True if ``path`` exists."""
        ...
