"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from tests.test_utils.env_helpers import SimulatedCdtestEnv


@pytest.fixture
def cdtest_env(tmp_path: Path) -> SimulatedCdtestEnv:
    """Create a SimulatedCdtestEnv with roots under tmp_path."""
    return SimulatedCdtestEnv(tmp_path)
