"""RNG utilities for the simulation.

Every stochastic rule (genetics, epidemic, random events, market) draws from a
single ``random.Random`` owned by the engine and passed in explicitly. These
helpers fail loudly when that RNG is missing rather than silently creating an
unseeded fallback.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not provided.

    This indicates a bug in the caller: every stochastic rule must receive
    the engine's RNG.
    """
    pass


def require_rng(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def seed_infection(animals, rng=None):
            _rng = require_rng(rng, "epidemic.seed_infection")
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass the engine RNG explicitly."
        )
    return rng


def chance(rng: random.Random, probability: float) -> bool:
    """Return True with the given probability (0.0-1.0)."""
    return rng.random() < probability


def percent_chance(rng: random.Random, percent: int) -> bool:
    """Return True with ``percent`` % probability.

    Values <= 0 never succeed and values >= 100 always succeed.
    """
    return rng.random() * 100 < percent
