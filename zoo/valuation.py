"""Pure pricing and cost functions.

Nothing here mutates state or draws randomness; every figure is a
deterministic function of its inputs. Integer division truncates toward
zero to match the cost formulas (ages and capacities are never negative,
so ``//`` is equivalent there).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from zoo.config.economy import (
    ADVERTISING_COST_PER_POPULARITY,
    ANIMAL_AGE_DISCOUNT,
    ANIMAL_AGE_DISCOUNT_PERIOD_DAYS,
    ANIMAL_BASE_PRICE,
    ANIMAL_PRICE_PER_KG,
    AQUATIC_DAILY_SURCHARGE,
    AQUATIC_SURCHARGE,
    CARNIVORE_SURCHARGE,
    CLIMATE_PRICE_STEP,
    CURE_COST,
    ENCLOSURE_BASE_COST,
    ENCLOSURE_BASE_DAILY_COST,
    ENCLOSURE_CLIMATE_COST_STEP,
    ENCLOSURE_CLIMATE_DAILY_STEP,
    ENCLOSURE_COST_PER_SLOT,
    ENCLOSURE_DAILY_CAPACITY_DIVISOR,
    ENCLOSURE_UPGRADE_COST_PER_SLOT,
    FOOD_PRICE_PER_KG,
    MIN_ANIMAL_PRICE,
    MIN_ENCLOSURE_COST,
    MIN_ENCLOSURE_DAILY_COST,
    SELL_RATIO_PERCENT,
)

if TYPE_CHECKING:
    from zoo.entities.animal import Animal, Climate


def price(animal: Animal) -> int:
    """Market price of an animal, never below ``MIN_ANIMAL_PRICE``.

    Heavier, carnivorous, colder-climate and aquatic animals cost more;
    every full 30 days of age knocks 5 off.
    """
    value = (
        ANIMAL_BASE_PRICE
        + animal.weight * ANIMAL_PRICE_PER_KG
        - (animal.age_in_days // ANIMAL_AGE_DISCOUNT_PERIOD_DAYS) * ANIMAL_AGE_DISCOUNT
    )
    if animal.is_carnivore:
        value += CARNIVORE_SURCHARGE
    value += animal.climate.ordinal * CLIMATE_PRICE_STEP
    if animal.is_aquatic:
        value += AQUATIC_SURCHARGE
    return max(MIN_ANIMAL_PRICE, value)


def sell_value(animal: Animal) -> int:
    """What the zoo receives for selling an animal (80% of price, floored)."""
    return price(animal) * SELL_RATIO_PERCENT // 100


def maintenance_cost(animal: Animal) -> int:
    """Informational upkeep figure; aquatic animals cost double.

    Not charged by the day cycle.
    """
    if animal.is_aquatic:
        return animal.weight * 2
    return animal.weight


def enclosure_construction_cost(climate: Climate, capacity: int) -> int:
    return max(
        MIN_ENCLOSURE_COST,
        ENCLOSURE_BASE_COST
        + capacity * ENCLOSURE_COST_PER_SLOT
        + climate.ordinal * ENCLOSURE_CLIMATE_COST_STEP,
    )


def enclosure_daily_cost(climate: Climate, capacity: int, animals: Iterable[Animal] = ()) -> int:
    """Daily upkeep of an enclosure, including a surcharge per aquatic resident."""
    aquatic = sum(1 for animal in animals if animal.is_aquatic)
    cost = (
        ENCLOSURE_BASE_DAILY_COST
        + capacity // ENCLOSURE_DAILY_CAPACITY_DIVISOR
        + climate.ordinal * ENCLOSURE_CLIMATE_DAILY_STEP
        + AQUATIC_DAILY_SURCHARGE * aquatic
    )
    return max(MIN_ENCLOSURE_DAILY_COST, cost)


def enclosure_upgrade_cost(capacity: int, level: int) -> int:
    return capacity * ENCLOSURE_UPGRADE_COST_PER_SLOT * (level + 1)


def cure_cost() -> int:
    return CURE_COST


def food_cost(kg: int) -> int:
    return kg * FOOD_PRICE_PER_KG


def advertising_gain(spend: int) -> int:
    """Popularity bought by an advertising campaign of ``spend`` coins."""
    return spend // ADVERTISING_COST_PER_POPULARITY
