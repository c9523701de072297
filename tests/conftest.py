"""
Shared fixtures for scoreboard tests
"""
import pytest

from scoreboard.services.contest import ContestEngine


@pytest.fixture
def engine():
    return ContestEngine()
