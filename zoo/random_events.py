"""Random daily events that nudge money and popularity.

At most one event fires per day: a 20% roll, then a fair coin between the
positive and negative tables, then a uniform pick within the table.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from zoo.config.events import (
    EVENT_CHANCE_PERCENT,
    NEGATIVE_EVENTS,
    POSITIVE_EVENT_CHANCE,
    POSITIVE_EVENTS,
)
from zoo.entities.zoo import Zoo
from zoo.util.rng import chance, percent_chance, require_rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RandomEvent:
    """A scripted event and its effect."""

    description: str
    money_delta: int = 0
    popularity_delta: int = 0

    @property
    def is_positive(self) -> bool:
        return self.money_delta >= 0 and self.popularity_delta >= 0


def _build(table) -> Tuple[RandomEvent, ...]:
    return tuple(RandomEvent(desc, money, popularity) for desc, money, popularity in table)


POSITIVE = _build(POSITIVE_EVENTS)
NEGATIVE = _build(NEGATIVE_EVENTS)


def roll_random_event(rng: random.Random) -> Optional[RandomEvent]:
    """Pick today's event, or None if nothing happens."""
    if not percent_chance(rng, EVENT_CHANCE_PERCENT):
        return None
    table = POSITIVE if chance(rng, POSITIVE_EVENT_CHANCE) else NEGATIVE
    return rng.choice(table)


def apply_event(zoo: Zoo, event: RandomEvent) -> None:
    """Apply an event's effect and record it in the day's event log."""
    zoo.money += event.money_delta
    zoo.popularity = max(0, zoo.popularity + event.popularity_delta)
    zoo.event_log.append(event.description)


def process_random_events(zoo: Zoo, rng: Optional[random.Random] = None) -> Optional[RandomEvent]:
    """Roll for today's event and apply it immediately.

    Returns:
        The event that fired, or None
    """
    _rng = require_rng(rng, "random_events.process_random_events")
    event = roll_random_event(_rng)
    if event is not None:
        apply_event(zoo, event)
        logger.info("Event: %s", event.description)
    return event
