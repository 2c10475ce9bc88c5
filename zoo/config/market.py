"""Animal market configuration constants."""

MARKET_SIZE = 10
MARKET_MIN_AGE_DAYS = 1
MARKET_MAX_AGE_DAYS = 20
MARKET_MIN_WEIGHT = 5
MARKET_MAX_WEIGHT = 100

# After this day refreshing costs money and purchases are limited
FREE_MARKET_DAYS = 10
MARKET_REFRESH_COST = 150
DAILY_PURCHASE_LIMIT = 1

# Species names keyed by climate value
SPECIES_BY_CLIMATE = {
    "desert": ("Sand Dragon", "Stone Scorpion", "Sun Lizard", "Desert Wolf", "Giant Scorpion"),
    "forest": ("Forest Phoenix", "Shadow Deer", "Crystal Bear", "Sparkling Fox", "Mechanical Unicorn"),
    "arctic": ("Ice Bear", "Snow Dragon", "Arctic Wolf", "Crystal Fish", "Ice Eagle"),
    "ocean": ("Deep Kraken", "Electric Shark", "Sea Dragon", "Water Spirit", "Ocean Giant"),
}
