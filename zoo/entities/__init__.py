"""Entity model: animals, enclosures, employees and the zoo aggregate."""

from zoo.entities.animal import (
    Animal,
    Climate,
    Diet,
    Gender,
    Habitat,
    HealthState,
    habitat_for_climate,
)
from zoo.entities.employee import Employee
from zoo.entities.enclosure import Enclosure
from zoo.entities.zoo import Zoo

__all__ = [
    "Animal",
    "Climate",
    "Diet",
    "Employee",
    "Enclosure",
    "Gender",
    "Habitat",
    "HealthState",
    "Zoo",
    "habitat_for_climate",
]
