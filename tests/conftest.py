"""Shared test fixtures."""

import pytest

from pyhours import OverflowPolicy


@pytest.fixture
def reset_policy():
    return OverflowPolicy.RESET


@pytest.fixture
def saturate_policy():
    return OverflowPolicy.SATURATE


ALL_POLICIES = [
    OverflowPolicy.RESET,
    OverflowPolicy.SATURATE,
]
