"""Per-day state passed through the day-cycle pipeline, and its report.

A fresh :class:`DayContext` is created for every call to ``advance_day``.
Steps record what happened (deaths, infections, money flows) on it instead
of on the zoo, and the final :class:`DayReport` is frozen from it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from zoo.entities.animal import Animal
from zoo.events.domain_events import AnimalDiedEvent, AnimalInfectedEvent, DeathCause
from zoo.events.event_bus import EventBus

_CAUSE_TEXT = {
    DeathCause.OLD_AGE: "died of old age",
    DeathCause.EPIDEMIC: "died of the virus",
    DeathCause.STARVATION: "died of starvation",
}


@dataclass(frozen=True)
class DeathNotice:
    """An animal that died during the day."""

    name: str
    species: str
    enclosure_id: int
    cause: DeathCause

    def describe(self) -> str:
        return f'Animal "{self.name}" {_CAUSE_TEXT[self.cause]}.'


@dataclass
class DayContext:
    """Explicit per-day state for pipeline steps.

    Attributes:
        rng: Engine RNG
        bus: Optional event bus for domain events
        day: Day being resolved
        deaths: Animals that died, in the order they died
        new_infections: Names of animals infected today
        visitors: Visitors counted in the revenue step
        income: Ticket income
        salaries: Payroll paid
        upkeep: Enclosure upkeep paid
        feeding_cost: Money spent serving food
        bankrupt: Set by the bankruptcy check
    """

    rng: random.Random
    bus: Optional[EventBus] = None
    day: int = 0
    deaths: List[DeathNotice] = field(default_factory=list)
    new_infections: List[str] = field(default_factory=list)
    visitors: int = 0
    income: int = 0
    salaries: int = 0
    upkeep: int = 0
    feeding_cost: int = 0
    bankrupt: bool = False

    def record_death(self, animal: Animal, enclosure_id: int, cause: DeathCause) -> None:
        self.deaths.append(DeathNotice(animal.name, animal.species, enclosure_id, cause))
        if self.bus is not None:
            self.bus.emit(AnimalDiedEvent(animal.name, animal.species, enclosure_id, cause, self.day))

    def record_infection(self, animal: Animal, enclosure_id: int) -> None:
        self.new_infections.append(animal.name)
        if self.bus is not None:
            self.bus.emit(AnimalInfectedEvent(animal.name, enclosure_id, self.day))


@dataclass(frozen=True)
class DayReport:
    """Outcome of one resolved day.

    Attributes:
        day: The day that was resolved
        event_log: Random-event descriptions for the day
        deaths: Death notices (old age, epidemic, starvation)
        new_infections: Names of animals infected today
        visitors: Visitor count
        income: Ticket income
        salaries: Payroll paid
        upkeep: Enclosure upkeep paid
        feeding_cost: Money spent serving food
        money: Money at the end of the day
        food: Food stock at the end of the day
        popularity: Popularity at the end of the day
        animals: Animals alive at the end of the day
        bankrupt: The zoo ended the day in debt; the session is lost
        completed: The final day was survived; the session is won
    """

    day: int
    event_log: Tuple[str, ...]
    deaths: Tuple[DeathNotice, ...]
    new_infections: Tuple[str, ...]
    visitors: int
    income: int
    salaries: int
    upkeep: int
    feeding_cost: int
    money: int
    food: int
    popularity: int
    animals: int
    bankrupt: bool
    completed: bool

    @property
    def expenses(self) -> int:
        return self.salaries + self.upkeep + self.feeding_cost

    def deaths_by(self, cause: DeathCause) -> List[DeathNotice]:
        return [notice for notice in self.deaths if notice.cause is cause]
