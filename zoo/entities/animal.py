"""Animal record and the enums describing its traits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Climate(Enum):
    """Climate an animal is adapted to and an enclosure provides."""

    DESERT = "desert"
    FOREST = "forest"
    ARCTIC = "arctic"
    OCEAN = "ocean"

    @property
    def ordinal(self) -> int:
        """Position used by the cost formulas (Desert=0 ... Ocean=3)."""
        return _CLIMATE_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value.capitalize()


_CLIMATE_ORDER = (Climate.DESERT, Climate.FOREST, Climate.ARCTIC, Climate.OCEAN)


class Diet(Enum):
    CARNIVORE = "carnivore"
    HERBIVORE = "herbivore"


class Habitat(Enum):
    """Land or water dwelling; independent of climate."""

    LAND = "land"
    AQUATIC = "aquatic"


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class HealthState(Enum):
    HEALTHY = "healthy"
    INFECTED = "infected"


def habitat_for_climate(climate: Climate) -> Habitat:
    """Habitat of an animal spawned (not bred) in ``climate``."""
    return Habitat.AQUATIC if climate is Climate.OCEAN else Habitat.LAND


@dataclass
class Animal:
    """A single animal.

    Market animals have no parents; bred animals record both parent names.
    Death is not a state here: a dead animal is removed from its enclosure.

    Attributes:
        name: Player-assigned name (empty until assigned)
        species: Species label, possibly a hybrid such as "Ice Fox"
        age_in_days: Age in days (>= 0)
        weight: Weight in kg (> 0)
        climate: Climate the animal needs
        diet: Carnivore or herbivore
        habitat: Land or aquatic
        gender: Male or female
        health: Healthy or infected
        parents: (parent1 name, parent2 name) for bred animals
    """

    name: str
    species: str
    age_in_days: int
    weight: int
    climate: Climate
    diet: Diet
    habitat: Habitat
    gender: Gender
    health: HealthState = HealthState.HEALTHY
    parents: Optional[Tuple[str, str]] = None

    def __post_init__(self) -> None:
        if self.age_in_days < 0:
            raise ValueError(f"age_in_days must be >= 0, got {self.age_in_days}")
        if self.weight <= 0:
            raise ValueError(f"weight must be > 0, got {self.weight}")

    @property
    def is_aquatic(self) -> bool:
        return self.habitat is Habitat.AQUATIC

    @property
    def is_carnivore(self) -> bool:
        return self.diet is Diet.CARNIVORE

    @property
    def is_infected(self) -> bool:
        return self.health is HealthState.INFECTED

    def infect(self) -> None:
        self.health = HealthState.INFECTED

    def cure(self) -> None:
        self.health = HealthState.HEALTHY

    def grow_older(self) -> None:
        """Advance age by one day."""
        self.age_in_days += 1
