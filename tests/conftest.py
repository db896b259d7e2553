"""
Shared pytest fixtures and configuration for outcomes tests.

This module provides:
- structlog / settings cleanup for test isolation
- A ``divide`` helper used by the Result chaining tests
"""

from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

from outcomes.core.result import Result
from outcomes.core.settings import get_settings


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark every test as a unit test unless it says otherwise."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if "unit" not in markers:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_fixture() -> Generator[None, None, None]:
    """Restore structlog defaults and drop bound context around each test."""
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def clean_settings_fixture(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Run in an empty directory with no OUTCOMES_* variables and a cold settings cache."""
    monkeypatch.chdir(tmp_path)
    for name in ("OUTCOMES_LOG_LEVEL", "OUTCOMES_LOG_JSON", "OUTCOMES_SERVICE_NAME"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Domain Helpers
# =============================================================================


@pytest.fixture
def divide() -> Callable[[float, float], Result[float]]:
    """Division that reports a zero divisor as a failure Result."""

    def _divide(a: float, b: float) -> Result[float]:
        if b == 0:
            return Result.failure_with_message("Division by zero is not allowed.")
        return Result.ok(a / b)

    return _divide
