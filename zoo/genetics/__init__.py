"""Breeding and offspring synthesis.

- ``compatibility``: who may mate, and which pair an enclosure picks
- ``reproduction``: hybrid species naming and offspring creation
"""

from zoo.genetics.compatibility import check_mating, find_breeding_pair, is_breeding_age
from zoo.genetics.reproduction import (
    breed,
    breed_animals,
    combine_species,
    roll_offspring_count,
    split_species,
)

__all__ = [
    "breed",
    "breed_animals",
    "check_mating",
    "combine_species",
    "find_breeding_pair",
    "is_breeding_age",
    "roll_offspring_count",
    "split_species",
]
