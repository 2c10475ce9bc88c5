"""Smoke tests for the headless runner in main.py."""

import logging

from main import run_headless, stock_zoo, tend_zoo
from tests.fakes.factories import make_animal
from zoo.config.simulation_config import ZooConfig
from zoo.entities.animal import Climate, Diet
from zoo.simulation import ZooEngine


def _stocked_engine() -> ZooEngine:
    """Engine whose market holds one animal per case stock_zoo must handle."""
    engine = ZooEngine(ZooConfig(seed=3))
    engine.zoo.market = [
        make_animal("", "Shadow Deer"),
        make_animal("", "Sand Dragon", climate=Climate.DESERT),
        make_animal("", "Sea Dragon", climate=Climate.OCEAN),
        make_animal("", "Crystal Bear", diet=Diet.CARNIVORE),
    ]
    stock_zoo(engine)
    return engine


def test_stock_zoo_builds_and_buys() -> None:
    engine = _stocked_engine()
    forest, desert = engine.zoo.enclosures

    assert (forest.climate, desert.climate) == (Climate.FOREST, Climate.DESERT)
    assert [a.name for a in forest.animals] == ["Deer-1"]
    assert [a.name for a in desert.animals] == ["Dragon-2"]
    # No Ocean enclosure; the carnivore clashes with the deer's diet.
    assert [a.species for a in engine.zoo.market] == ["Sea Dragon", "Crystal Bear"]
    # 5000 - 210 - 160 for enclosures, 150 + 100 for animals
    assert engine.zoo.money == 4380


def test_tend_zoo_stocks_three_days_of_food() -> None:
    engine = _stocked_engine()
    tend_zoo(engine)
    assert engine.zoo.food == 6
    assert engine.zoo.money == 4368
    assert engine.total_animals() == 2


def test_well_funded_session_completes(caplog) -> None:
    config = ZooConfig(seed=11, final_day=3, starting_money=1_000_000)
    engine = ZooEngine(config)
    with caplog.at_level(logging.INFO):
        code = run_headless(config, engine)
    assert code == 0
    assert engine.completed
    assert engine.zoo.day == 4
    assert "HEADLESS ZOO SIMULATION" in caplog.text
    assert "Survived 3 days" in caplog.text


def test_indebted_session_goes_bankrupt(caplog) -> None:
    config = ZooConfig(seed=11, final_day=3)
    engine = ZooEngine(config)
    # Beyond the reach of any sponsor event
    engine.zoo.money = -5000
    with caplog.at_level(logging.INFO):
        code = run_headless(config, engine)
    assert code == 1
    assert engine.bankrupt
    assert engine.zoo.day == 2
    assert engine.zoo.enclosures == []
    assert "BANKRUPTCY!" in caplog.text
