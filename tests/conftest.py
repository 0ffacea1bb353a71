"""
Pytest configuration for calculator tests.
"""

import pytest

from core import SimpleCalculator


@pytest.fixture
def calculator() -> SimpleCalculator:
    """Calculator with the default (looped) precedence check."""
    return SimpleCalculator()


@pytest.fixture
def single_pop_calculator() -> SimpleCalculator:
    """Calculator reproducing the single top-of-stack comparison."""
    return SimpleCalculator(single_pop=True)
