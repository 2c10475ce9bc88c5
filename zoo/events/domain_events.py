"""Domain event definitions.

Events are frozen dataclasses describing something that already happened.
They carry plain values (names, numbers) rather than references to live
entities, so handlers cannot mutate simulation state through them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DeathCause(Enum):
    OLD_AGE = "old_age"
    EPIDEMIC = "epidemic"
    STARVATION = "starvation"


@dataclass(frozen=True)
class AnimalDiedEvent:
    """An animal died and was removed from its enclosure.

    Attributes:
        name: Name of the animal
        species: Species label
        enclosure_id: Enclosure it lived in
        cause: Why it died
        day: Day on which it died
    """

    name: str
    species: str
    enclosure_id: int
    cause: DeathCause
    day: int


@dataclass(frozen=True)
class AnimalInfectedEvent:
    """An animal caught the virus (seeding or spread)."""

    name: str
    enclosure_id: int
    day: int


@dataclass(frozen=True)
class AnimalBornEvent:
    """An offspring was added to an enclosure."""

    name: str
    species: str
    enclosure_id: int
    parents: tuple[str, str]
    day: int


@dataclass(frozen=True)
class RandomEventFiredEvent:
    """A scripted random event changed money and/or popularity."""

    description: str
    money_delta: int
    popularity_delta: int
    day: int


@dataclass(frozen=True)
class DayResolvedEvent:
    """A day finished resolving.

    Attributes:
        day: The day that was resolved
        money: Money after the day
        popularity: Popularity after the day
        animals: Animals alive after the day
        bankrupt: Whether the zoo went bankrupt
    """

    day: int
    money: int
    popularity: int
    animals: int
    bankrupt: bool
