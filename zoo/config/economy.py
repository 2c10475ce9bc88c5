"""Economy configuration constants: prices, costs and staff roles."""

# Starting state of a new zoo
DEFAULT_ZOO_NAME = "City Zoo"
DEFAULT_STARTING_MONEY = 5000
STARTING_FOOD_KG = 0
STARTING_POPULARITY = 50
FINAL_DAY = 30  # Session is won once this day has been resolved

# Animal pricing
ANIMAL_BASE_PRICE = 60
ANIMAL_PRICE_PER_KG = 2
ANIMAL_AGE_DISCOUNT_PERIOD_DAYS = 30
ANIMAL_AGE_DISCOUNT = 5
CARNIVORE_SURCHARGE = 100
CLIMATE_PRICE_STEP = 50
AQUATIC_SURCHARGE = 200
MIN_ANIMAL_PRICE = 10
SELL_RATIO_PERCENT = 80

# Enclosures
ENCLOSURE_BASE_COST = 100
ENCLOSURE_COST_PER_SLOT = 10
ENCLOSURE_CLIMATE_COST_STEP = 50
MIN_ENCLOSURE_COST = 150
ENCLOSURE_BASE_DAILY_COST = 10
ENCLOSURE_DAILY_CAPACITY_DIVISOR = 10
ENCLOSURE_CLIMATE_DAILY_STEP = 5
AQUATIC_DAILY_SURCHARGE = 10
MIN_ENCLOSURE_DAILY_COST = 10
ENCLOSURE_UPGRADE_COST_PER_SLOT = 5
MAX_ENCLOSURE_LEVEL = 3

# Consumables and services
FOOD_PRICE_PER_KG = 2  # Also charged per kg eaten during the day cycle
CURE_COST = 30
ADVERTISING_COST_PER_POPULARITY = 20
VISITORS_PER_POPULARITY = 2
POPULARITY_FLUCTUATION_RATIO = 0.1

# Staff roles: role -> (salary, max animals)
DIRECTOR_ROLE = "Director"
DIRECTOR_NAME = "Egor Potroshila"
EMPLOYEE_ROLES = {
    "Cleaner": (80, 20),
    "Veterinarian": (150, 10),
    "Feeder": (100, 30),
    DIRECTOR_ROLE: (50, 50),
}
HIREABLE_ROLES = ("Cleaner", "Veterinarian", "Feeder")
