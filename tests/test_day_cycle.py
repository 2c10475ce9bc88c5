"""Tests for the day-cycle pipeline.

Most tests drive the cycle with a scripted RNG whose chance rolls all fail
and whose randint returns 0, so nothing random happens unless a test asks
for it.
"""

import random

import pytest

from tests.fakes.factories import make_animal
from tests.fakes.scripted_rng import ScriptedRandom, always
from zoo.entities.animal import Climate
from zoo.entities.employee import Employee
from zoo.entities.zoo import Zoo
from zoo.events.domain_events import AnimalDiedEvent, DayResolvedEvent, DeathCause
from zoo.events.event_bus import EventBus
from zoo.simulation.day_cycle import (
    DayPipeline,
    DayStep,
    advance_day,
    default_pipeline,
    dies_of_old_age,
)
from zoo.util.rng import MissingRNGError


def _zoo(animals: int = 3, money: int = 1000, food: int = 10) -> Zoo:
    zoo = Zoo("Test Zoo", money)
    zoo.food = food
    enclosure = zoo.add_enclosure(Climate.FOREST, 10)
    for i in range(animals):
        enclosure.add_animal(make_animal(f"a{i}")).unwrap()
    return zoo


class TestPipelineShape:
    def test_step_order(self) -> None:
        assert default_pipeline().step_names == [
            "day_start",
            "random_event",
            "aging",
            "epidemic",
            "infection_penalty",
            "revenue",
            "payroll",
            "staff_assignment",
            "enclosure_upkeep",
            "feeding",
            "popularity_fluctuation",
            "bankruptcy_check",
            "day_end",
        ]

    def test_custom_pipeline_runs_only_its_steps(self) -> None:
        calls = []
        pipeline = DayPipeline([DayStep("only", lambda zoo, ctx: calls.append(ctx.day))])
        zoo = _zoo()
        report = advance_day(zoo, always(False), pipeline=pipeline)
        assert calls == [1]
        assert zoo.day == 1
        assert report.money == 1000

    def test_requires_rng(self) -> None:
        with pytest.raises(MissingRNGError):
            advance_day(_zoo())


class TestQuietDay:
    """A day where every chance roll fails."""

    def test_money_flows(self) -> None:
        zoo = _zoo()
        report = advance_day(zoo, always(False))

        assert report.visitors == 100
        assert report.income == 300
        assert report.salaries == 50
        assert report.upkeep == 16
        assert report.feeding_cost == 6
        assert report.expenses == 72
        assert zoo.money == 1000 + 300 - 72
        assert zoo.food == 7
        assert report.event_log == ()
        assert report.deaths == ()

    def test_day_counter_and_ages(self) -> None:
        zoo = _zoo()
        ages = [a.age_in_days for _, a in zoo.iter_animals()]
        report = advance_day(zoo, always(False))
        assert report.day == 1
        assert zoo.day == 2
        assert [a.age_in_days for _, a in zoo.iter_animals()] == [age + 1 for age in ages]

    def test_day_start_resets_purchases_and_log(self) -> None:
        zoo = _zoo()
        zoo.animals_bought_today = 1
        zoo.event_log.append("stale")
        advance_day(zoo, always(False))
        assert zoo.animals_bought_today == 0
        assert zoo.event_log == []

    def test_completion_on_final_day(self) -> None:
        zoo = _zoo()
        zoo.day = 30
        assert advance_day(zoo, always(False)).completed
        zoo = _zoo()
        zoo.day = 29
        assert not advance_day(zoo, always(False)).completed


class TestAging:
    def test_old_age_threshold(self) -> None:
        assert not dies_of_old_age(60, always(True))
        assert dies_of_old_age(61, ScriptedRandom([0.005]))
        assert not dies_of_old_age(61, ScriptedRandom([0.01]))
        assert dies_of_old_age(160, ScriptedRandom([0.99]))

    def test_old_animal_removed_and_reported(self) -> None:
        zoo = _zoo(animals=0)
        enclosure = zoo.enclosures[0]
        enclosure.add_animal(make_animal("Elder", age=200)).unwrap()
        enclosure.add_animal(make_animal("Young", age=10)).unwrap()
        bus = EventBus()
        died = []
        bus.subscribe(AnimalDiedEvent, died.append)

        report = advance_day(zoo, always(False), bus=bus)

        assert [a.name for a in enclosure.animals] == ["Young"]
        assert [d.describe() for d in report.deaths] == ['Animal "Elder" died of old age.']
        assert died[0].cause is DeathCause.OLD_AGE
        assert died[0].enclosure_id == enclosure.enclosure_id


class TestInfection:
    def test_infected_animals_cost_popularity_before_revenue(self) -> None:
        zoo = _zoo(animals=0)
        enclosure = zoo.enclosures[0]
        for i in range(4):
            enclosure.add_animal(make_animal(f"a{i}", infected=i == 0)).unwrap()

        report = advance_day(zoo, always(False))

        assert zoo.popularity == 49
        assert report.visitors == 98
        assert report.income == 98 * 4

    def test_seeded_infection_is_reported(self) -> None:
        zoo = _zoo(animals=2)
        # random event fails, seed infects a0, spread roll for a1 fails
        rng = ScriptedRandom([0.99, 0.1, 0.99])
        report = advance_day(zoo, rng)
        assert report.new_infections == ("a0",)


class TestFeeding:
    def test_starvation_kills_up_to_the_deficit(self) -> None:
        zoo = _zoo(animals=5, food=2)
        # event roll and 5 seed rolls fail; every starvation roll succeeds
        rng = ScriptedRandom([0.99] * 6, default_random=0.0)
        report = advance_day(zoo, rng)
        # deficit 3: the first three animals die
        assert len(report.deaths_by(DeathCause.STARVATION)) == 3
        assert zoo.total_animals() == 2
        assert zoo.food == 0
        assert report.feeding_cost == 0

    def test_starvation_rolls_can_all_fail(self) -> None:
        zoo = _zoo(animals=3, food=0)
        report = advance_day(zoo, always(False))
        assert report.deaths == ()
        assert zoo.total_animals() == 3
        assert zoo.money == 1000 + 300 - 50 - 16


class TestStaffAndPopularity:
    def test_staff_tallies_reset_and_recomputed(self) -> None:
        zoo = _zoo(animals=3)
        vet = Employee.for_role("Vera", "Veterinarian")
        vet.current_animals = 7
        zoo.employees.append(vet)

        report = advance_day(zoo, always(False))

        assert report.salaries == 200
        assert zoo.director.current_animals == 3
        assert vet.current_animals == 3

    def test_fluctuation_bounded(self) -> None:
        zoo = _zoo()
        advance_day(zoo, ScriptedRandom(ints=[5]))
        assert zoo.popularity == 55

        zoo = _zoo()
        with pytest.raises(AssertionError):
            advance_day(zoo, ScriptedRandom(ints=[6]))


class TestBankruptcy:
    def test_negative_money_bankrupts(self) -> None:
        zoo = _zoo(animals=0, money=10, food=0)
        bus = EventBus()
        summaries = []
        bus.subscribe(DayResolvedEvent, summaries.append)

        report = advance_day(zoo, always(False), bus=bus)

        assert report.bankrupt
        assert not report.completed
        assert zoo.money == 10 - 50 - 16
        assert zoo.day == 2
        assert summaries[0].bankrupt

    def test_zero_money_is_not_bankrupt(self) -> None:
        zoo = _zoo(animals=0, money=66, food=0)
        assert not advance_day(zoo, always(False)).bankrupt


@pytest.mark.slow
class TestLongRun:
    def test_thirty_days_keep_invariants(self) -> None:
        rng = random.Random(2024)
        zoo = _zoo(animals=6, money=100000, food=1000)
        ocean = zoo.add_enclosure(Climate.OCEAN, 6)
        for i in range(3):
            ocean.add_animal(make_animal(f"fish{i}", climate=Climate.OCEAN)).unwrap()

        for _ in range(30):
            before = {id(a): a.age_in_days for _, a in zoo.iter_animals()}
            advance_day(zoo, rng)
            assert zoo.popularity >= 0
            for enclosure in zoo.enclosures:
                assert enclosure.size <= enclosure.capacity
                for animal in enclosure.animals:
                    assert animal.is_aquatic == (enclosure.climate is Climate.OCEAN)
                    assert animal.age_in_days == before[id(animal)] + 1
        assert zoo.day == 31
