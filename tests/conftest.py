"""Pytest configuration and shared fixtures.

Fixtures:
- mock_logger: MagicMock standing in for LoggerProtocol
- counting_random_source: deterministic RandomSourceProtocol for unit tests
- bcrypt_service: BcryptPasswordService at the minimum cost (fast) with
  the real OS random source
"""

from unittest.mock import MagicMock

import pytest

from typed_password.core.enums import CostPolicy
from typed_password.infrastructure.security import (
    BcryptPasswordService,
    OsRandomSource,
)


class CountingRandomSource:
    """Deterministic byte source: returns 0, 1, 2, ... and records requests."""

    def __init__(self) -> None:
        self.requests: list[int] = []

    def token_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        return bytes(i % 256 for i in range(n))


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double implementing LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def counting_random_source() -> CountingRandomSource:
    """Deterministic random source."""
    return CountingRandomSource()


@pytest.fixture
def bcrypt_service(mock_logger: MagicMock) -> BcryptPasswordService:
    """Real bcrypt service at cost 4 so integration tests stay fast."""
    return BcryptPasswordService(
        random_source=OsRandomSource(logger=mock_logger),
        logger=mock_logger,
        default_cost=4,
        cost_policy=CostPolicy.CLAMP,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests against the real bcrypt library"
    )

