"""Enclosure: a capacity-bounded, climate-homogeneous housing unit."""

from __future__ import annotations

import logging
from typing import List, Optional

from zoo import valuation
from zoo.config.economy import MAX_ENCLOSURE_LEVEL
from zoo.entities.animal import Animal, Climate, Diet
from zoo.errors import ErrorCode, ZooError, fail
from zoo.result import Ok, Result

logger = logging.getLogger(__name__)


class Enclosure:
    """Houses animals that share one climate, one habitat and one diet.

    The diet of the enclosure is whatever the first resident eats; it is
    unconstrained again only once the enclosure is empty. Ocean enclosures
    take aquatic animals only, all other climates take land animals only.

    Attributes:
        enclosure_id: Stable identifier assigned by the zoo
        climate: Climate provided (fixed at construction)
        capacity: Maximum number of residents (doubles on upgrade)
        animals: Residents in insertion order
        daily_cost: Upkeep charged by the day cycle
        level: Upgrade level, 1..MAX_ENCLOSURE_LEVEL
    """

    def __init__(self, enclosure_id: int, climate: Climate, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.enclosure_id = enclosure_id
        self.climate = climate
        self.capacity = capacity
        self.animals: List[Animal] = []
        self.level = 1
        self.daily_cost = valuation.enclosure_daily_cost(climate, capacity, self.animals)

    def __repr__(self) -> str:
        return (
            f"Enclosure(id={self.enclosure_id}, climate={self.climate.value}, "
            f"animals={len(self.animals)}/{self.capacity}, level={self.level})"
        )

    @property
    def size(self) -> int:
        return len(self.animals)

    @property
    def free_slots(self) -> int:
        return self.capacity - len(self.animals)

    @property
    def is_full(self) -> bool:
        return len(self.animals) >= self.capacity

    @property
    def diet(self) -> Optional[Diet]:
        """Diet fixed by the first resident, or None when empty."""
        if not self.animals:
            return None
        return self.animals[0].diet

    @property
    def infected_count(self) -> int:
        return sum(1 for animal in self.animals if animal.is_infected)

    def check_placement(self, animal: Animal) -> Result[None, ZooError]:
        """Check whether ``animal`` may move in, without changing anything."""
        if self.is_full:
            return fail(ErrorCode.ENCLOSURE_FULL, f"Enclosure {self.enclosure_id} is full")
        if animal.climate is not self.climate:
            return fail(
                ErrorCode.INCOMPATIBLE_ENCLOSURE,
                f"{animal.climate.label} animal cannot live in a {self.climate.label} enclosure",
            )
        if self.climate is Climate.OCEAN and not animal.is_aquatic:
            return fail(
                ErrorCode.INCOMPATIBLE_ENCLOSURE,
                "Only aquatic animals can live in an Ocean enclosure",
            )
        if self.climate is not Climate.OCEAN and animal.is_aquatic:
            return fail(
                ErrorCode.INCOMPATIBLE_ENCLOSURE,
                "Aquatic animals can only live in an Ocean enclosure",
            )
        diet = self.diet
        if diet is not None and diet is not animal.diet:
            return fail(
                ErrorCode.INCOMPATIBLE_ENCLOSURE,
                "Carnivores and herbivores cannot share an enclosure",
            )
        return Ok(None)

    def can_add(self, animal: Animal) -> bool:
        return self.check_placement(animal).is_ok()

    def add_animal(self, animal: Animal) -> Result[None, ZooError]:
        """Append ``animal`` if placement rules allow it."""
        check = self.check_placement(animal)
        if check.is_err():
            logger.debug("Rejected %s for enclosure %d: %s", animal.name, self.enclosure_id, check.error)
            return check
        self.animals.append(animal)
        return check

    def animal_at(self, index: int) -> Optional[Animal]:
        if 0 <= index < len(self.animals):
            return self.animals[index]
        return None

    def remove_at(self, index: int) -> Animal:
        return self.animals.pop(index)

    def remove_animal(self, animal: Animal) -> None:
        """Remove a specific resident (identity, not name equality)."""
        for i, resident in enumerate(self.animals):
            if resident is animal:
                del self.animals[i]
                return
        raise ValueError(f"{animal.name!r} does not live in enclosure {self.enclosure_id}")

    def find_by_name(self, name: str) -> Optional[Animal]:
        for animal in self.animals:
            if animal.name == name:
                return animal
        return None

    @property
    def can_upgrade(self) -> bool:
        return self.level < MAX_ENCLOSURE_LEVEL

    def upgrade_cost(self) -> int:
        return valuation.enclosure_upgrade_cost(self.capacity, self.level)

    def upgrade(self) -> int:
        """Double capacity, raise upkeep, bump the level.

        Upkeep grows by half of the daily cost computed for the new capacity.
        Callers must check ``can_upgrade`` and charge the cost first.

        Returns:
            The new level
        """
        if not self.can_upgrade:
            raise ValueError(f"Enclosure {self.enclosure_id} is already at max level")
        self.capacity *= 2
        self.daily_cost += valuation.enclosure_daily_cost(self.climate, self.capacity, self.animals) // 2
        self.level += 1
        return self.level
