"""Shared test fixtures for beacon staging tests."""

import pytest

from beacon_staging.config import StagingConfig


class ScriptedRandomSource:
    """Random source returning a fixed sequence of values."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def next_positive_integer(self) -> int:
        value = self._values[self.calls]
        self.calls += 1
        return value


# =============================================================================
# Random Source Fixtures
# =============================================================================

@pytest.fixture
def scripted_random():
    """Factory for random sources that replay the given values."""
    def factory(*values):
        return ScriptedRandomSource(values)
    return factory


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def config() -> StagingConfig:
    """Default test configuration."""
    return StagingConfig()


@pytest.fixture
def random_config() -> StagingConfig:
    """Configuration with randomized session numbers."""
    return StagingConfig.from_dict({
        "identifiers": {"session_strategy": "random"},
    })
