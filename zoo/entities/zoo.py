"""Zoo aggregate root.

The zoo exclusively owns its enclosures, employees and market pool. It is
always constructed explicitly and handed to the operations that use it;
there is no process-wide instance.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from zoo.config.economy import (
    DIRECTOR_NAME,
    DIRECTOR_ROLE,
    EMPLOYEE_ROLES,
    STARTING_FOOD_KG,
    STARTING_POPULARITY,
)
from zoo.entities.animal import Animal, Climate
from zoo.entities.employee import Employee
from zoo.entities.enclosure import Enclosure


class Zoo:
    """State of one zoo across the session.

    Attributes:
        name: Zoo name
        money: Coins; may go negative during a day, checked at the day boundary
        food: Food stock in kg
        popularity: Popularity (>= 0)
        day: Current day, starting at 1
        animals_bought_today: Purchases made since the last day boundary
        enclosures: Enclosures in construction order
        employees: Staff in hiring order; the Director is always present
        market: Animals currently offered for purchase
        event_log: Descriptions of events from the last resolved day
    """

    def __init__(self, name: str, money: int, director_name: str = DIRECTOR_NAME) -> None:
        self.name = name
        self.money = money
        self.food = STARTING_FOOD_KG
        self.popularity = STARTING_POPULARITY
        self.day = 1
        self.animals_bought_today = 0
        self.enclosures: List[Enclosure] = []
        self.employees: List[Employee] = []
        self.market: List[Animal] = []
        self.event_log: List[str] = []
        self._next_enclosure_id = 1

        salary, max_animals = EMPLOYEE_ROLES[DIRECTOR_ROLE]
        self.employees.append(Employee(director_name, DIRECTOR_ROLE, salary, max_animals))

    def __repr__(self) -> str:
        return (
            f"Zoo(name={self.name!r}, day={self.day}, money={self.money}, "
            f"food={self.food}, popularity={self.popularity}, animals={self.total_animals()})"
        )

    # ------------------------------------------------------------------
    # Enclosures
    # ------------------------------------------------------------------

    def add_enclosure(self, climate: Climate, capacity: int) -> Enclosure:
        enclosure = Enclosure(self._next_enclosure_id, climate, capacity)
        self._next_enclosure_id += 1
        self.enclosures.append(enclosure)
        return enclosure

    def get_enclosure(self, enclosure_id: int) -> Optional[Enclosure]:
        for enclosure in self.enclosures:
            if enclosure.enclosure_id == enclosure_id:
                return enclosure
        return None

    # ------------------------------------------------------------------
    # Animals
    # ------------------------------------------------------------------

    def iter_animals(self) -> Iterator[Tuple[Enclosure, Animal]]:
        """Yield (enclosure, animal) pairs in enclosure then insertion order."""
        for enclosure in self.enclosures:
            for animal in enclosure.animals:
                yield enclosure, animal

    def total_animals(self) -> int:
        return sum(enclosure.size for enclosure in self.enclosures)

    def total_infected(self) -> int:
        return sum(enclosure.infected_count for enclosure in self.enclosures)

    def find_animal(self, name: str) -> Optional[Tuple[Enclosure, Animal]]:
        """First animal called ``name``, searching enclosures in order."""
        for enclosure, animal in self.iter_animals():
            if animal.name == name:
                return enclosure, animal
        return None

    # ------------------------------------------------------------------
    # Staff
    # ------------------------------------------------------------------

    @property
    def director(self) -> Employee:
        for employee in self.employees:
            if employee.is_director:
                return employee
        raise RuntimeError("Zoo has no Director")
