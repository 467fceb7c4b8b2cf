"""Concrete infrastructure implementations."""

from .filesystem import LocalFileSystem

__all__ = ["LocalFileSystem"]
