"""Shared fixtures for the Monty Hall test suite."""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


ALL_GAMES = [
    ('car', 'goat', 'goat'),
    ('goat', 'car', 'goat'),
    ('goat', 'goat', 'car'),
]


@pytest.fixture
def rng():
    """Seeded random number generator."""
    return np.random.default_rng(42)


@pytest.fixture
def all_games():
    """Every valid door arrangement."""
    return list(ALL_GAMES)
