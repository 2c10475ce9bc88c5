"""Tests for breeding: compatibility, offspring synthesis and the enclosure protocol."""

import random

import pytest

from tests.fakes.factories import make_animal
from tests.fakes.scripted_rng import ScriptedRandom
from zoo.entities.animal import Climate, Diet, Gender, Habitat
from zoo.entities.enclosure import Enclosure
from zoo.errors import ErrorCode
from zoo.exceptions import GeneticsError
from zoo.genetics import (
    breed,
    breed_animals,
    combine_species,
    find_breeding_pair,
    roll_offspring_count,
)


class TestCombineSpecies:
    def test_hybrid_takes_one_word_from_each(self, seeded_rng) -> None:
        allowed = {"Ice Fire", "Ice Bear", "Wolf Fire", "Wolf Bear"}
        seen = {combine_species("Ice Wolf", "Fire Bear", seeded_rng) for _ in range(200)}
        assert seen <= allowed
        assert seen == allowed

    def test_deterministic_for_fixed_draws(self) -> None:
        first = combine_species("Ice Wolf", "Fire Bear", ScriptedRandom(choices=[1, 0]))
        second = combine_species("Ice Wolf", "Fire Bear", ScriptedRandom(choices=[1, 0]))
        assert first == second == "Wolf Fire"

    def test_extra_whitespace_is_ignored(self) -> None:
        assert combine_species("  Sea   Dragon ", "Owl", ScriptedRandom(choices=[1, 0])) == "Dragon Owl"

    def test_empty_label_is_rejected(self, seeded_rng) -> None:
        with pytest.raises(GeneticsError):
            combine_species("   ", "Fire Bear", seeded_rng)


class TestBreed:
    @pytest.mark.parametrize(
        "gender_b,species_b",
        [
            (Gender.MALE, "Crystal Bear"),
            (Gender.FEMALE, "Shadow Deer"),
            (Gender.MALE, "Shadow Deer"),
        ],
    )
    def test_incompatible_pairs(self, seeded_rng, gender_b: Gender, species_b: str) -> None:
        a = make_animal("A", "Shadow Deer", gender=Gender.MALE)
        b = make_animal("B", species_b, gender=gender_b)
        result = breed(a, b, seeded_rng)
        assert result.is_err()
        assert result.error.code is ErrorCode.INCOMPATIBLE_MATING

    def test_offspring_traits(self, seeded_rng) -> None:
        mother = make_animal(
            "Nala", "Desert Wolf", gender=Gender.FEMALE, weight=31, climate=Climate.DESERT
        )
        father = make_animal(
            "Rex", "Sun Lizard", gender=Gender.MALE, weight=20, diet=Diet.CARNIVORE
        )
        child = breed(mother, father, seeded_rng).unwrap()

        assert child.age_in_days == 1
        assert child.weight == 25
        assert child.climate is Climate.DESERT
        assert child.diet is Diet.CARNIVORE
        assert child.habitat is Habitat.LAND
        assert child.parents == ("Nala", "Rex")
        assert child.name == ""
        assert child.species.split()[0] in ("Desert", "Wolf")
        assert child.species.split()[1] in ("Sun", "Lizard")

    def test_aquatic_if_either_parent_aquatic(self, seeded_rng) -> None:
        land = make_animal("L", "Ice Bear", gender=Gender.MALE, climate=Climate.ARCTIC)
        sea = make_animal("S", "Sea Dragon", gender=Gender.FEMALE, climate=Climate.OCEAN)
        assert breed(land, sea, seeded_rng).unwrap().habitat is Habitat.AQUATIC
        assert breed(sea, land, seeded_rng).unwrap().habitat is Habitat.AQUATIC

    def test_land_when_both_parents_land(self, seeded_rng) -> None:
        a = make_animal("A", "Ice Bear", gender=Gender.MALE)
        b = make_animal("B", "Snow Dragon", gender=Gender.FEMALE)
        assert breed(a, b, seeded_rng).unwrap().habitat is Habitat.LAND

    def test_offspring_gender_covers_both(self) -> None:
        rng = random.Random(3)
        a = make_animal("A", "Ice Bear", gender=Gender.MALE)
        b = make_animal("B", "Snow Dragon", gender=Gender.FEMALE)
        genders = {breed(a, b, rng).unwrap().gender for _ in range(100)}
        assert genders == {Gender.MALE, Gender.FEMALE}


class TestBreedingPair:
    def test_first_match_in_insertion_order(self) -> None:
        animals = [
            make_animal("young", gender=Gender.FEMALE, age=3),
            make_animal("m1", gender=Gender.MALE, age=10),
            make_animal("m2", gender=Gender.MALE, age=10),
            make_animal("f1", gender=Gender.FEMALE, age=10),
            make_animal("f2", gender=Gender.FEMALE, age=50),
        ]
        first, second = find_breeding_pair(animals)
        assert (first.name, second.name) == ("m1", "f1")

    def test_age_must_exceed_five_days(self) -> None:
        animals = [
            make_animal("m", gender=Gender.MALE, age=5),
            make_animal("f", gender=Gender.FEMALE, age=40),
        ]
        assert find_breeding_pair(animals) is None

    def test_same_gender_only(self) -> None:
        animals = [make_animal("a"), make_animal("b")]
        assert find_breeding_pair(animals) is None


class TestOffspringCount:
    def test_twins_on_low_roll(self) -> None:
        assert roll_offspring_count(ScriptedRandom([0.05])) == 2
        assert roll_offspring_count(ScriptedRandom([0.10])) == 1

    @pytest.mark.slow
    def test_twin_rate_is_about_ten_percent(self) -> None:
        rng = random.Random(11)
        twins = sum(roll_offspring_count(rng) == 2 for _ in range(10000))
        assert 800 < twins < 1200


def _forest_pair(capacity: int = 5) -> Enclosure:
    enclosure = Enclosure(1, Climate.FOREST, capacity)
    enclosure.add_animal(make_animal("Bambi", "Shadow Deer", gender=Gender.MALE, age=10)).unwrap()
    enclosure.add_animal(make_animal("Faline", "Crystal Bear", gender=Gender.FEMALE, age=10)).unwrap()
    return enclosure


class TestBreedAnimals:
    def test_scenario_one_or_two_offspring(self, seeded_rng) -> None:
        for _ in range(20):
            enclosure = _forest_pair()
            offspring = breed_animals(enclosure, seeded_rng, ["Kid1", "Kid2"]).unwrap()
            assert len(offspring) in (1, 2)
            assert all(child.age_in_days == 1 for child in offspring)
            assert enclosure.size <= 5
            assert enclosure.animals[2:] == offspring

    def test_names_applied_in_order(self) -> None:
        enclosure = _forest_pair()
        offspring = breed_animals(enclosure, ScriptedRandom([0.01]), ["Kid1"]).unwrap()
        assert [child.name for child in offspring] == ["Kid1", ""]
        assert all(child.parents == ("Bambi", "Faline") for child in offspring)

    def test_twins_clamped_to_free_capacity(self) -> None:
        enclosure = _forest_pair(capacity=3)
        offspring = breed_animals(enclosure, ScriptedRandom([0.01]), ["A", "B"]).unwrap()
        assert len(offspring) == 1
        assert enclosure.size == 3

    def test_full_enclosure(self, seeded_rng) -> None:
        enclosure = _forest_pair(capacity=2)
        result = breed_animals(enclosure, seeded_rng)
        assert result.error.code is ErrorCode.ENCLOSURE_FULL
        assert enclosure.size == 2

    def test_too_few_animals(self, seeded_rng) -> None:
        enclosure = Enclosure(1, Climate.FOREST, 5)
        enclosure.add_animal(make_animal()).unwrap()
        assert breed_animals(enclosure, seeded_rng).error.code is ErrorCode.TOO_FEW_ANIMALS

    def test_no_eligible_pair(self, seeded_rng) -> None:
        enclosure = Enclosure(1, Climate.FOREST, 5)
        enclosure.add_animal(make_animal("a", gender=Gender.MALE)).unwrap()
        enclosure.add_animal(make_animal("b", gender=Gender.FEMALE, age=2)).unwrap()
        result = breed_animals(enclosure, seeded_rng)
        assert result.error.code is ErrorCode.NO_ELIGIBLE_PAIR
        assert enclosure.size == 2

    def test_same_species_pair_is_rejected_without_changes(self, seeded_rng) -> None:
        enclosure = Enclosure(1, Climate.FOREST, 5)
        enclosure.add_animal(make_animal("a", "Shadow Deer", gender=Gender.MALE)).unwrap()
        enclosure.add_animal(make_animal("b", "Shadow Deer", gender=Gender.FEMALE)).unwrap()
        result = breed_animals(enclosure, seeded_rng)
        assert result.error.code is ErrorCode.INCOMPATIBLE_MATING
        assert enclosure.size == 2
