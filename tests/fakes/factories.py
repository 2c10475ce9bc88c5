"""Builders for test entities."""

from typing import Optional

from zoo.entities.animal import Animal, Climate, Diet, Gender, Habitat, HealthState


def make_animal(
    name: str = "Rex",
    species: str = "Shadow Deer",
    *,
    age: int = 10,
    weight: int = 20,
    climate: Climate = Climate.FOREST,
    diet: Diet = Diet.HERBIVORE,
    habitat: Optional[Habitat] = None,
    gender: Gender = Gender.MALE,
    infected: bool = False,
) -> Animal:
    """Build an animal with sensible defaults; habitat follows climate unless given."""
    if habitat is None:
        habitat = Habitat.AQUATIC if climate is Climate.OCEAN else Habitat.LAND
    return Animal(
        name=name,
        species=species,
        age_in_days=age,
        weight=weight,
        climate=climate,
        diet=diet,
        habitat=habitat,
        gender=gender,
        health=HealthState.INFECTED if infected else HealthState.HEALTHY,
    )
