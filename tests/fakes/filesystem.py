"""Filesystem fakes for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing_extensions import override

from hospitality_staffing.protocols import FileSystem
from tests.support.errors import FakeFileNotFoundError


def _empty_files() -> dict[str, str]:
    return {}


@dataclass
class InMemoryFileSystem(FileSystem):
    """In-memory filesystem for testing."""

    _files: dict[str, str] = field(default_factory=_empty_files)
    reads: list[str] = field(default_factory=list)

    @override
    def read_text(self, path: Path) -> str:
        key = str(path)
        if key not in self._files:
            raise FakeFileNotFoundError(key)
        self.reads.append(key)
        return self._files[key]

    def write_text(self, content: str, path: Path) -> None:
        self._files[str(path)] = content

    @override
    def exists(self, path: Path) -> bool:
        return str(path) in self._files
