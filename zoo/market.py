"""Market generator: the pool of animals the player can buy."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from zoo.config.market import (
    FREE_MARKET_DAYS,
    MARKET_MAX_AGE_DAYS,
    MARKET_MAX_WEIGHT,
    MARKET_MIN_AGE_DAYS,
    MARKET_MIN_WEIGHT,
    MARKET_REFRESH_COST,
    MARKET_SIZE,
    SPECIES_BY_CLIMATE,
)
from zoo.entities.animal import Animal, Climate, Diet, Gender, habitat_for_climate
from zoo.entities.zoo import Zoo
from zoo.errors import ErrorCode, ZooError, fail
from zoo.result import Ok, Result
from zoo.util.rng import require_rng

logger = logging.getLogger(__name__)


def random_species(climate: Climate, rng: random.Random) -> str:
    return rng.choice(SPECIES_BY_CLIMATE[climate.value])


def generate_random_animal(rng: Optional[random.Random] = None) -> Animal:
    """Create an unnamed market animal with random traits.

    Habitat follows climate: Ocean animals are aquatic, all others live on land.
    """
    _rng = require_rng(rng, "market.generate_random_animal")
    age = _rng.randint(MARKET_MIN_AGE_DAYS, MARKET_MAX_AGE_DAYS)
    weight = _rng.randint(MARKET_MIN_WEIGHT, MARKET_MAX_WEIGHT)
    climate = _rng.choice(list(Climate))
    diet = _rng.choice((Diet.CARNIVORE, Diet.HERBIVORE))
    gender = _rng.choice((Gender.MALE, Gender.FEMALE))
    return Animal(
        name="",
        species=random_species(climate, _rng),
        age_in_days=age,
        weight=weight,
        climate=climate,
        diet=diet,
        habitat=habitat_for_climate(climate),
        gender=gender,
    )


def generate_pool(rng: Optional[random.Random] = None, size: int = MARKET_SIZE) -> List[Animal]:
    _rng = require_rng(rng, "market.generate_pool")
    return [generate_random_animal(_rng) for _ in range(size)]


def refresh_cost(day: int) -> int:
    """Cost of refreshing the market on ``day`` (free for the first days)."""
    return 0 if day <= FREE_MARKET_DAYS else MARKET_REFRESH_COST


def refresh_market(
    zoo: Zoo, rng: Optional[random.Random] = None, size: int = MARKET_SIZE
) -> Result[None, ZooError]:
    """Regenerate the whole pool, charging the refresh cost after day 10.

    With insufficient money nothing changes and nothing is charged.
    """
    _rng = require_rng(rng, "market.refresh_market")
    cost = refresh_cost(zoo.day)
    if zoo.money < cost:
        return fail(
            ErrorCode.INSUFFICIENT_FUNDS,
            f"Refreshing the market costs {cost} coins after day {FREE_MARKET_DAYS}",
        )
    zoo.money -= cost
    zoo.market = generate_pool(_rng, size)
    logger.debug("Market refreshed on day %d for %d coins", zoo.day, cost)
    return Ok(None)
