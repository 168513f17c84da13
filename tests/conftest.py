"""
Pytest configuration and shared fixtures.
"""

import pytest

from src.backend.core.config import Settings, reset_settings
from src.backend.core.i18n import reset_i18n


class FixedRandom:
    """Random source that returns queued values, then repeats the last one."""

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


@pytest.fixture
def fixed_rng():
    """Factory for a random source returning the given values."""
    return FixedRandom


@pytest.fixture
def default_settings():
    """Default settings, independent of config/settings.yaml."""
    return Settings()


@pytest.fixture(autouse=True)
def reset_globals():
    """Drop cached settings and i18n between tests."""
    reset_settings()
    reset_i18n()
    yield
    reset_settings()
    reset_i18n()
