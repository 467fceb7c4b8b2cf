"""Filesystem implementations for infrastructure.

Usage example:
    from pathlib import Path

    from hospitality_staffing.infrastructure.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    payload = fs.read_text(Path("config/staffing_catalog.json"))
"""

from __future__ import annotations

from pathlib import Path

from ..protocols import FileSystem


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return path.exists()
