"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the clop test suite.
"""

from collections.abc import Generator

import pytest

from clop import OptionParser, Var

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def plain_color_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep NO_COLOR/FORCE_COLOR from the developer's shell out of tests."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    yield


@pytest.fixture
def parser() -> OptionParser:
    """A parser with no build information, so output is deterministic."""
    p = OptionParser()
    p.compile_info = None
    return p


@pytest.fixture
def abc_parser(parser: OptionParser) -> tuple[OptionParser, Var, Var, Var]:
    """
    Parser with boolean options -a, -b, -c (all defaulting to False).

    Returns:
        tuple: (parser, a, b, c)
    """
    a, b, c = Var(False), Var(False), Var(False)
    parser.add(a, "-a", "--alpha", "option a")
    parser.add(b, "-b", "option b")
    parser.add(c, "-c", "option c")
    return parser, a, b, c


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(mark.name == "property" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
