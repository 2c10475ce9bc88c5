"""Biological rule constants: aging, breeding and disease."""

# Aging
OLD_AGE_THRESHOLD_DAYS = 60  # Above this, death chance = (age - 60) %

# Breeding
BREEDING_MIN_AGE_DAYS = 5  # Both parents must be strictly older
OFFSPRING_AGE_DAYS = 1
TWIN_CHANCE_PERCENT = 10

# Epidemic
SEED_INFECTION_CHANCE_PERCENT = 30
SPREAD_INFECTION_CHANCE_PERCENT = 30
MAX_INFECTIONS_PER_SOURCE = 2
EPIDEMIC_DEATH_CHANCE = 0.5

# Starvation
STARVATION_DEATH_CHANCE = 0.5
