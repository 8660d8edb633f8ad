"""Pytest configuration and shared fixtures for klaw-guard tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings

import klaw_guard._config
from klaw_guard._logging import reset_logging

# clean_state only resets module globals, so it is safe to share across examples
settings.register_profile('klaw-guard', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('klaw-guard')


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test unconfigured, with no guard environment variables."""
    monkeypatch.delenv('KLAW_GUARD_LEGACY_TYPE_CHECKS', raising=False)
    monkeypatch.delenv('KLAW_GUARD_LOG_LEVEL', raising=False)
    monkeypatch.setattr(klaw_guard._config, '_config', None)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def legacy_type_checks() -> None:
    """Enable the legacy type-class assertions for one test."""
    klaw_guard._config.init(legacy_type_checks=True)


@pytest.fixture
def sample_error() -> ValueError:
    """Sample exception for testing."""
    return ValueError('test error')
