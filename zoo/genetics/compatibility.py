"""Mating rules and breeding-pair selection."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from zoo.config.biology import BREEDING_MIN_AGE_DAYS
from zoo.entities.animal import Animal
from zoo.errors import ErrorCode, ZooError, fail
from zoo.result import Ok, Result


def check_mating(parent1: Animal, parent2: Animal) -> Result[None, ZooError]:
    """Two animals may mate only if their genders and species both differ."""
    if parent1.gender is parent2.gender:
        return fail(ErrorCode.INCOMPATIBLE_MATING, "Same gender, breeding is impossible")
    if parent1.species == parent2.species:
        return fail(ErrorCode.INCOMPATIBLE_MATING, "Animals of the same species cannot breed")
    return Ok(None)


def is_breeding_age(animal: Animal) -> bool:
    return animal.age_in_days > BREEDING_MIN_AGE_DAYS


def find_breeding_pair(animals: Sequence[Animal]) -> Optional[Tuple[Animal, Animal]]:
    """Return the first pair (i < j) of opposite gender where both are of age.

    The search is first-match in insertion order, not best-match: the outer
    loop walks candidates for the first parent, the inner loop the animals
    after it.
    """
    for i, first in enumerate(animals):
        if not is_breeding_age(first):
            continue
        for second in animals[i + 1:]:
            if second.gender is not first.gender and is_breeding_age(second):
                return first, second
    return None
