"""Offspring synthesis.

A hybrid's species label takes one word from each parent's label, so
"Ice Wolf" x "Fire Bear" can give "Ice Fire", "Ice Bear", "Wolf Fire" or
"Wolf Bear". Other traits are inherited deterministically except gender,
which is a fair coin.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from zoo.config.biology import OFFSPRING_AGE_DAYS, TWIN_CHANCE_PERCENT
from zoo.entities.animal import Animal, Diet, Gender, Habitat
from zoo.entities.enclosure import Enclosure
from zoo.errors import ErrorCode, ZooError, fail
from zoo.exceptions import GeneticsError
from zoo.genetics.compatibility import check_mating, find_breeding_pair
from zoo.result import Ok, Result
from zoo.util.rng import percent_chance, require_rng

logger = logging.getLogger(__name__)


def split_species(species: str) -> List[str]:
    """Split a species label into whitespace-delimited words."""
    return species.split()


def combine_species(species1: str, species2: str, rng: Optional[random.Random] = None) -> str:
    """Build a hybrid label from one random word of each parent label.

    Raises:
        GeneticsError: If either label has no words
    """
    _rng = require_rng(rng, "reproduction.combine_species")
    words1 = split_species(species1)
    words2 = split_species(species2)
    if not words1 or not words2:
        raise GeneticsError(
            f"Cannot combine species {species1!r} and {species2!r}: empty label"
        )
    return f"{_rng.choice(words1)} {_rng.choice(words2)}"


def breed(
    parent1: Animal, parent2: Animal, rng: Optional[random.Random] = None
) -> Result[Animal, ZooError]:
    """Create one offspring of ``parent1`` and ``parent2``.

    The offspring is one day old, weighs the parents' mean (floored), lives in
    parent1's climate, is a carnivore or aquatic if either parent is, and
    records both parent names. Its name is left empty for the caller.

    Returns:
        Ok(offspring), or Err(INCOMPATIBLE_MATING) for equal gender or species
    """
    _rng = require_rng(rng, "reproduction.breed")
    check = check_mating(parent1, parent2)
    if check.is_err():
        return check

    carnivore = parent1.is_carnivore or parent2.is_carnivore
    aquatic = parent1.is_aquatic or parent2.is_aquatic
    offspring = Animal(
        name="",
        species=combine_species(parent1.species, parent2.species, _rng),
        age_in_days=OFFSPRING_AGE_DAYS,
        weight=(parent1.weight + parent2.weight) // 2,
        climate=parent1.climate,
        diet=Diet.CARNIVORE if carnivore else Diet.HERBIVORE,
        habitat=Habitat.AQUATIC if aquatic else Habitat.LAND,
        gender=_rng.choice((Gender.MALE, Gender.FEMALE)),
        parents=(parent1.name, parent2.name),
    )
    return Ok(offspring)


def roll_offspring_count(rng: random.Random) -> int:
    """One offspring, or twins with ``TWIN_CHANCE_PERCENT`` probability."""
    return 2 if percent_chance(rng, TWIN_CHANCE_PERCENT) else 1


def breed_animals(
    enclosure: Enclosure,
    rng: Optional[random.Random] = None,
    names: Sequence[str] = (),
) -> Result[List[Animal], ZooError]:
    """Breed the first eligible pair in ``enclosure`` and house the offspring.

    Litter size is clamped to the free capacity. Every check runs before the
    first offspring is added, so a failure leaves the enclosure untouched.

    Args:
        enclosure: Enclosure whose residents breed
        rng: Engine RNG
        names: Names for the offspring, applied in order; missing names stay empty

    Returns:
        Ok(list of offspring) or Err with TOO_FEW_ANIMALS, NO_ELIGIBLE_PAIR,
        INCOMPATIBLE_MATING or ENCLOSURE_FULL
    """
    _rng = require_rng(rng, "reproduction.breed_animals")
    if enclosure.size < 2:
        return fail(ErrorCode.TOO_FEW_ANIMALS, "Not enough animals to breed")

    pair = find_breeding_pair(enclosure.animals)
    if pair is None:
        return fail(ErrorCode.NO_ELIGIBLE_PAIR, "No suitable pair found for breeding")
    parent1, parent2 = pair

    check = check_mating(parent1, parent2)
    if check.is_err():
        return check

    count = min(roll_offspring_count(_rng), enclosure.free_slots)
    if count <= 0:
        return fail(ErrorCode.ENCLOSURE_FULL, "Enclosure is full, breeding is impossible")

    offspring: List[Animal] = []
    for i in range(count):
        child = breed(parent1, parent2, _rng).unwrap()
        child.name = names[i] if i < len(names) else ""
        enclosure.add_animal(child).unwrap()
        offspring.append(child)
        logger.debug(
            "Born %r (%s, %s) to %s and %s",
            child.name,
            child.species,
            child.gender.value,
            parent1.name,
            parent2.name,
        )
    return Ok(offspring)
