"""Day-cycle pipeline: the single state transition that advances the zoo.

``advance_day`` runs the steps below in this exact order. The order is
observable (income is computed after the infection penalty, feeding after
upkeep, and so on), so steps must not be reordered.

Step Order:
    1. day_start: clear the event log, reset the purchase counter
    2. random_event: at most one scripted event
    3. aging: every animal ages a day; old animals may die
    4. epidemic: per enclosure, seed then spread
    5. infection_penalty: popularity drops by the number of infected animals
    6. revenue: visitors = 2 * popularity, income = visitors * animals
    7. payroll: salaries paid, staff tallies reset
    8. staff_assignment: capacity-utilization tallies
    9. enclosure_upkeep: daily cost of each enclosure
    10. feeding: serve food or let hungry animals starve
    11. popularity_fluctuation: random drift of up to 10%
    12. bankruptcy_check: money < 0 ends the session
    13. day_end: day += 1
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from zoo import epidemic
from zoo.config.biology import OLD_AGE_THRESHOLD_DAYS, STARVATION_DEATH_CHANCE
from zoo.config.economy import (
    FINAL_DAY,
    FOOD_PRICE_PER_KG,
    POPULARITY_FLUCTUATION_RATIO,
    VISITORS_PER_POPULARITY,
)
from zoo.entities.zoo import Zoo
from zoo.events.domain_events import DayResolvedEvent, DeathCause, RandomEventFiredEvent
from zoo.events.event_bus import EventBus
from zoo.random_events import process_random_events
from zoo.simulation.day_context import DayContext, DayReport
from zoo.util.rng import chance, percent_chance, require_rng

logger = logging.getLogger(__name__)


@dataclass
class DayStep:
    """A single named step of the day cycle."""

    name: str
    fn: Callable[[Zoo, DayContext], None]


class DayPipeline:
    """Ordered sequence of steps executed once per day."""

    def __init__(self, steps: List[DayStep]) -> None:
        self._steps = steps

    @property
    def steps(self) -> List[DayStep]:
        return self._steps

    @property
    def step_names(self) -> List[str]:
        return [step.name for step in self._steps]

    def run(self, zoo: Zoo, ctx: DayContext) -> None:
        for step in self._steps:
            step.fn(zoo, ctx)


# =============================================================================
# Steps
# =============================================================================


def _step_day_start(zoo: Zoo, ctx: DayContext) -> None:
    zoo.event_log.clear()
    zoo.animals_bought_today = 0


def _step_random_event(zoo: Zoo, ctx: DayContext) -> None:
    event = process_random_events(zoo, ctx.rng)
    if event is not None and ctx.bus is not None:
        ctx.bus.emit(
            RandomEventFiredEvent(event.description, event.money_delta, event.popularity_delta, ctx.day)
        )


def dies_of_old_age(age_in_days: int, rng: random.Random) -> bool:
    """Past the threshold, death chance is (age - threshold) percent."""
    if age_in_days <= OLD_AGE_THRESHOLD_DAYS:
        return False
    return percent_chance(rng, age_in_days - OLD_AGE_THRESHOLD_DAYS)


def _step_aging(zoo: Zoo, ctx: DayContext) -> None:
    for enclosure in zoo.enclosures:
        survivors = []
        for animal in enclosure.animals:
            animal.grow_older()
            if dies_of_old_age(animal.age_in_days, ctx.rng):
                ctx.record_death(animal, enclosure.enclosure_id, DeathCause.OLD_AGE)
                logger.debug("%r died of old age at %d days", animal.name, animal.age_in_days)
            else:
                survivors.append(animal)
        enclosure.animals[:] = survivors


def _step_epidemic(zoo: Zoo, ctx: DayContext) -> None:
    for enclosure in zoo.enclosures:
        seeded = epidemic.seed_infection(enclosure, ctx.rng)
        if seeded is not None:
            ctx.record_infection(seeded, enclosure.enclosure_id)
        outcome = epidemic.spread_infection(enclosure, ctx.rng)
        for animal in outcome.newly_infected:
            ctx.record_infection(animal, enclosure.enclosure_id)
        for animal in outcome.died:
            ctx.record_death(animal, enclosure.enclosure_id, DeathCause.EPIDEMIC)


def _step_infection_penalty(zoo: Zoo, ctx: DayContext) -> None:
    zoo.popularity = max(0, zoo.popularity - zoo.total_infected())


def _step_revenue(zoo: Zoo, ctx: DayContext) -> None:
    ctx.visitors = VISITORS_PER_POPULARITY * zoo.popularity
    ctx.income = ctx.visitors * zoo.total_animals()
    zoo.money += ctx.income


def _step_payroll(zoo: Zoo, ctx: DayContext) -> None:
    for employee in zoo.employees:
        zoo.money -= employee.salary
        ctx.salaries += employee.salary
        employee.current_animals = 0


def _step_staff_assignment(zoo: Zoo, ctx: DayContext) -> None:
    # Tally only: animals are not consumed, so one animal may count for several employees.
    for enclosure in zoo.enclosures:
        for employee in zoo.employees:
            if employee.current_animals < employee.max_animals:
                employee.current_animals += min(employee.spare_capacity, enclosure.size)
                if employee.current_animals >= employee.max_animals:
                    break


def _step_enclosure_upkeep(zoo: Zoo, ctx: DayContext) -> None:
    for enclosure in zoo.enclosures:
        zoo.money -= enclosure.daily_cost
        ctx.upkeep += enclosure.daily_cost


def _step_feeding(zoo: Zoo, ctx: DayContext) -> None:
    required = zoo.total_animals()
    if zoo.food >= required:
        zoo.food -= required
        ctx.feeding_cost = required * FOOD_PRICE_PER_KG
        zoo.money -= ctx.feeding_cost
        return

    deficit = required - zoo.food
    for enclosure in zoo.enclosures:
        animals = enclosure.animals
        i = 0
        while i < len(animals) and deficit > 0:
            if chance(ctx.rng, STARVATION_DEATH_CHANCE):
                animal = animals.pop(i)
                deficit -= 1
                ctx.record_death(animal, enclosure.enclosure_id, DeathCause.STARVATION)
                logger.debug("%r died of starvation", animal.name)
            else:
                i += 1
    zoo.food = 0


def _step_popularity_fluctuation(zoo: Zoo, ctx: DayContext) -> None:
    fluctuation = int(zoo.popularity * POPULARITY_FLUCTUATION_RATIO)
    change = ctx.rng.randint(-fluctuation, fluctuation)
    zoo.popularity = max(0, zoo.popularity + change)


def _step_bankruptcy_check(zoo: Zoo, ctx: DayContext) -> None:
    if zoo.money < 0:
        ctx.bankrupt = True
        logger.warning("BANKRUPTCY on day %d: money %d", ctx.day, zoo.money)


def _step_day_end(zoo: Zoo, ctx: DayContext) -> None:
    zoo.day += 1


def default_pipeline() -> DayPipeline:
    """Build the canonical day-cycle pipeline."""
    return DayPipeline(
        [
            DayStep("day_start", _step_day_start),
            DayStep("random_event", _step_random_event),
            DayStep("aging", _step_aging),
            DayStep("epidemic", _step_epidemic),
            DayStep("infection_penalty", _step_infection_penalty),
            DayStep("revenue", _step_revenue),
            DayStep("payroll", _step_payroll),
            DayStep("staff_assignment", _step_staff_assignment),
            DayStep("enclosure_upkeep", _step_enclosure_upkeep),
            DayStep("feeding", _step_feeding),
            DayStep("popularity_fluctuation", _step_popularity_fluctuation),
            DayStep("bankruptcy_check", _step_bankruptcy_check),
            DayStep("day_end", _step_day_end),
        ]
    )


def advance_day(
    zoo: Zoo,
    rng: Optional[random.Random] = None,
    *,
    bus: Optional[EventBus] = None,
    final_day: int = FINAL_DAY,
    pipeline: Optional[DayPipeline] = None,
) -> DayReport:
    """Advance ``zoo`` by exactly one day.

    Args:
        zoo: The zoo to advance
        rng: Engine RNG
        bus: Optional event bus receiving deaths, infections and the day summary
        final_day: Last day of the session; surviving it completes the session
        pipeline: Custom step order (tests); defaults to the canonical pipeline

    Returns:
        The report for the resolved day
    """
    _rng = require_rng(rng, "day_cycle.advance_day")
    ctx = DayContext(rng=_rng, bus=bus, day=zoo.day)
    (pipeline or default_pipeline()).run(zoo, ctx)

    report = DayReport(
        day=ctx.day,
        event_log=tuple(zoo.event_log),
        deaths=tuple(ctx.deaths),
        new_infections=tuple(ctx.new_infections),
        visitors=ctx.visitors,
        income=ctx.income,
        salaries=ctx.salaries,
        upkeep=ctx.upkeep,
        feeding_cost=ctx.feeding_cost,
        money=zoo.money,
        food=zoo.food,
        popularity=zoo.popularity,
        animals=zoo.total_animals(),
        bankrupt=ctx.bankrupt,
        completed=not ctx.bankrupt and ctx.day >= final_day,
    )
    if bus is not None:
        bus.emit(DayResolvedEvent(report.day, report.money, report.popularity, report.animals, report.bankrupt))
    logger.info(
        "Day %d resolved: income %d, expenses %d, money %d, popularity %d, animals %d",
        report.day,
        report.income,
        report.expenses,
        report.money,
        report.popularity,
        report.animals,
    )
    return report
