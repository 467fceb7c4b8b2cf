"""Pytest fixtures shared across the staffing core tests.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket
from collections.abc import Iterator

import pytest

from hospitality_staffing.domain.revenue_bands import RevenueBand, get_default_revenue_bands
from tests.fakes import InMemoryFileSystem
from tests.support.errors import NetworkIsolationError

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    """Raise an error if any test tries to make a real network connection."""
    _ = (self, kwargs)
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Block all network access in tests.

    This fixture runs automatically for all tests. Nothing in the staffing core
    talks to the network, so any connection attempt is a bug.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide an empty in-memory filesystem."""
    return InMemoryFileSystem()


@pytest.fixture
def default_bands() -> list[RevenueBand]:
    """Provide a fresh copy of the default revenue bands."""
    return get_default_revenue_bands()
