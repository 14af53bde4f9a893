"""Shared test fixtures."""
import os
import sys
import random
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tests.helpers import fixed_clock, flat_series


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def october_clock():
    """October: no seasonal bias."""
    return fixed_clock(2025, 10, 17)


@pytest.fixture
def flat_800():
    return flat_series()
