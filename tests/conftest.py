"""Pytest configuration and fixtures for zoo simulation tests."""

import random

import pytest

from zoo.config.simulation_config import ZooConfig


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def engine(seeded_rng):
    """A fresh engine with 1000 coins and a deterministic RNG."""
    from zoo.simulation import ZooEngine

    return ZooEngine(ZooConfig(zoo_name="Test Zoo", starting_money=1000), rng=seeded_rng)
