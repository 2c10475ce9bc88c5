"""Tests for the animal market."""

import random

from zoo.config.market import SPECIES_BY_CLIMATE
from zoo.entities.animal import Climate, Habitat
from zoo.entities.zoo import Zoo
from zoo.errors import ErrorCode
from zoo.market import generate_pool, generate_random_animal, refresh_cost, refresh_market


class TestGenerator:
    def test_generated_traits_in_range(self, seeded_rng) -> None:
        for _ in range(200):
            animal = generate_random_animal(seeded_rng)
            assert animal.name == ""
            assert 1 <= animal.age_in_days <= 20
            assert 5 <= animal.weight <= 100
            assert animal.species in SPECIES_BY_CLIMATE[animal.climate.value]
            assert animal.parents is None
            assert not animal.is_infected

    def test_habitat_follows_climate(self, seeded_rng) -> None:
        for animal in generate_pool(seeded_rng, 100):
            expected = Habitat.AQUATIC if animal.climate is Climate.OCEAN else Habitat.LAND
            assert animal.habitat is expected

    def test_same_seed_same_pool(self) -> None:
        assert generate_pool(random.Random(5)) == generate_pool(random.Random(5))
        assert len(generate_pool(random.Random(5))) == 10


class TestRefresh:
    def test_refresh_cost_schedule(self) -> None:
        assert refresh_cost(1) == 0
        assert refresh_cost(10) == 0
        assert refresh_cost(11) == 150

    def test_free_refresh_keeps_money(self, seeded_rng) -> None:
        zoo = Zoo("Test Zoo", 0)
        zoo.day = 10
        assert refresh_market(zoo, seeded_rng).is_ok()
        assert zoo.money == 0
        assert len(zoo.market) == 10

    def test_paid_refresh(self, seeded_rng) -> None:
        zoo = Zoo("Test Zoo", 200)
        zoo.day = 11
        old_pool = zoo.market
        refresh_market(zoo, seeded_rng, size=4).unwrap()
        assert zoo.money == 50
        assert zoo.market is not old_pool
        assert len(zoo.market) == 4

    def test_rejected_refresh_leaves_pool(self, seeded_rng) -> None:
        zoo = Zoo("Test Zoo", 149)
        zoo.day = 11
        zoo.market = generate_pool(seeded_rng, 3)
        before = list(zoo.market)

        result = refresh_market(zoo, seeded_rng)

        assert result.error.code is ErrorCode.INSUFFICIENT_FUNDS
        assert zoo.market == before
        assert zoo.money == 149
