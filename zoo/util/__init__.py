"""Core utilities for the simulation."""

from zoo.util.rng import MissingRNGError, chance, percent_chance, require_rng

__all__ = [
    "MissingRNGError",
    "chance",
    "percent_chance",
    "require_rng",
]
