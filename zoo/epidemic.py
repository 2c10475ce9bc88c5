"""Epidemic model: infection seeding and spread inside one enclosure.

Enclosures share no animals, so each one is processed on its own. The day
cycle calls :func:`seed_infection` then :func:`spread_infection` for every
enclosure.

Spread has two regimes:

- Majority infected (``infected > total // 2``): infected animals start
  dying, each with 50% probability as the scan reaches it, until the
  infected are no longer a majority or the enclosure is empty.
- Otherwise: every animal infected at the start of the pass tries to
  infect up to two healthy animals, 30% each.

There is no spontaneous recovery; only a paid cure heals an animal.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from zoo.config.biology import (
    EPIDEMIC_DEATH_CHANCE,
    MAX_INFECTIONS_PER_SOURCE,
    SEED_INFECTION_CHANCE_PERCENT,
    SPREAD_INFECTION_CHANCE_PERCENT,
)
from zoo.entities.animal import Animal
from zoo.entities.enclosure import Enclosure
from zoo.util.rng import chance, percent_chance, require_rng

logger = logging.getLogger(__name__)


@dataclass
class SpreadOutcome:
    """What a spread pass did to one enclosure.

    Attributes:
        newly_infected: Animals infected during the pass
        died: Animals removed because the infection killed them
    """

    newly_infected: List[Animal] = field(default_factory=list)
    died: List[Animal] = field(default_factory=list)


def seed_infection(enclosure: Enclosure, rng: Optional[random.Random] = None) -> Optional[Animal]:
    """Possibly infect one healthy animal.

    Healthy animals are tried in insertion order, each with a 30% chance;
    the first success ends the pass. Returns the infected animal, if any.
    """
    _rng = require_rng(rng, "epidemic.seed_infection")
    for animal in enclosure.animals:
        if animal.is_infected:
            continue
        if percent_chance(_rng, SEED_INFECTION_CHANCE_PERCENT):
            animal.infect()
            logger.debug("%r caught the virus in enclosure %d", animal.name, enclosure.enclosure_id)
            return animal
    return None


def spread_infection(enclosure: Enclosure, rng: Optional[random.Random] = None) -> SpreadOutcome:
    """Run the spread/death pass for one enclosure."""
    _rng = require_rng(rng, "epidemic.spread_infection")
    if enclosure.infected_count > enclosure.size // 2:
        return SpreadOutcome(died=_kill_infected(enclosure, _rng))
    return SpreadOutcome(newly_infected=_infect_neighbours(enclosure, _rng))


def _kill_infected(enclosure: Enclosure, rng: random.Random) -> List[Animal]:
    animals = enclosure.animals
    infected = enclosure.infected_count
    dead: List[Animal] = []

    def majority() -> bool:
        return infected > len(animals) // 2

    # Repeat full scans until the infected lose their majority.
    while animals and majority():
        i = 0
        while i < len(animals) and majority():
            animal = animals[i]
            if animal.is_infected and chance(rng, EPIDEMIC_DEATH_CHANCE):
                del animals[i]
                infected -= 1
                dead.append(animal)
                logger.debug("%r died of the virus", animal.name)
            else:
                i += 1
    return dead


def _infect_neighbours(enclosure: Enclosure, rng: random.Random) -> List[Animal]:
    # Sources are fixed at the start; animals infected in this pass do not spread yet.
    sources = [animal for animal in enclosure.animals if animal.is_infected]
    newly_infected: List[Animal] = []
    for _source in sources:
        infections = 0
        for target in enclosure.animals:
            if infections >= MAX_INFECTIONS_PER_SOURCE:
                break
            if target.is_infected:
                continue
            if percent_chance(rng, SPREAD_INFECTION_CHANCE_PERCENT):
                target.infect()
                infections += 1
                newly_infected.append(target)
                logger.debug("%r caught the virus", target.name)
    return newly_infected
