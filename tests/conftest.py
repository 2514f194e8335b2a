"""
Pytest configuration and shared fixtures for srvdiscovery tests.

Provides:
- Factories for dnspython-shaped SRV and TXT rdata objects
- A mock ``dns.resolver.Resolver`` whose answers are set per record type
- A default resolver configuration
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from srvdiscovery.discovery.configs import ResolverConfig


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# DNS Answer Fixtures
# ============================================================================


@pytest.fixture
def srv_rdata() -> Callable[..., MagicMock]:
    """Factory for SRV rdata with ``target``, ``port``, ``priority`` and ``weight``."""

    def _make(target: str, port: int = 27017, priority: int = 0, weight: int = 0) -> MagicMock:
        rdata = MagicMock()
        rdata.target = target
        rdata.port = port
        rdata.priority = priority
        rdata.weight = weight
        return rdata

    return _make


@pytest.fixture
def txt_rdata() -> Callable[..., MagicMock]:
    """Factory for TXT rdata made of one or more character-strings."""

    def _make(*strings: str | bytes) -> MagicMock:
        rdata = MagicMock()
        rdata.strings = tuple(s.encode() if isinstance(s, str) else s for s in strings)
        return rdata

    return _make


class FakeAnswers:
    """Per-record-type answers or exceptions for a mock resolver."""

    def __init__(self) -> None:
        self.answers: dict[str, Any] = {"SRV": [], "TXT": []}

    def __call__(self, qname: str, rdtype: str) -> Any:
        answer = self.answers[rdtype]
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def fake_answers() -> FakeAnswers:
    """Answers served by ``mock_dns_resolver``; assign ``fake_answers.answers["SRV"]``."""
    return FakeAnswers()


@pytest.fixture
def mock_dns_resolver(fake_answers: FakeAnswers) -> MagicMock:
    """Mock ``dns.resolver.Resolver`` serving ``fake_answers``."""
    resolver = MagicMock()
    resolver.resolve.side_effect = fake_answers
    return resolver


@pytest.fixture
def resolver_config() -> ResolverConfig:
    """A fresh configuration with no test hooks set."""
    return ResolverConfig()
