"""Domain events emitted by the zoo engine."""

from zoo.events.domain_events import (
    AnimalBornEvent,
    AnimalDiedEvent,
    AnimalInfectedEvent,
    DayResolvedEvent,
    DeathCause,
    RandomEventFiredEvent,
)
from zoo.events.event_bus import EventBus

__all__ = [
    "AnimalBornEvent",
    "AnimalDiedEvent",
    "AnimalInfectedEvent",
    "DayResolvedEvent",
    "DeathCause",
    "EventBus",
    "RandomEventFiredEvent",
]
