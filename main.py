"""Main entry point for the zoo simulation.

Runs a headless session with a simple scripted player: it opens one
enclosure per climate it can afford, buys compatible animals, keeps food in
stock, cures infected animals and advances days until the session ends.
The interactive menus are a separate layer; this driver only exercises the
engine and logs what happens.
"""

import argparse
import logging
import sys
from typing import Optional

from zoo.config.economy import DEFAULT_STARTING_MONEY, DEFAULT_ZOO_NAME, FINAL_DAY
from zoo.config.simulation_config import ZooConfig
from zoo.entities.animal import Climate
from zoo.events import AnimalDiedEvent
from zoo.exceptions import ConfigurationError
from zoo.simulation import ZooEngine

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 60
STARTER_CAPACITY = 6
FOOD_BUFFER_DAYS = 3


def stock_zoo(engine: ZooEngine) -> None:
    """Build starter enclosures and buy whatever the market offers that fits."""
    for climate in (Climate.FOREST, Climate.DESERT):
        engine.build_enclosure(climate, STARTER_CAPACITY)

    index = 0
    bought = 0
    while index < len(engine.zoo.market):
        animal = engine.zoo.market[index]
        homes = engine.suitable_enclosures(animal)
        if not homes:
            index += 1
            continue
        result = engine.buy_animal(index, f"{animal.species.split()[-1]}-{bought + 1}", homes[0].enclosure_id)
        if result.is_err():
            index += 1
            continue
        bought += 1


def tend_zoo(engine: ZooEngine) -> None:
    """Daily housekeeping before the day is resolved."""
    zoo = engine.zoo
    for _, animal in list(zoo.iter_animals()):
        if animal.is_infected:
            engine.cure_animal(animal.name)

    wanted = zoo.total_animals() * FOOD_BUFFER_DAYS - zoo.food
    if wanted > 0:
        engine.buy_food(wanted)

    for enclosure in zoo.enclosures:
        if enclosure.size >= 2 and enclosure.free_slots > 0:
            engine.breed_in_enclosure(enclosure.enclosure_id, 0, 1, [f"Cub-{zoo.day}"] * 2)


def run_headless(config: ZooConfig, engine: Optional[ZooEngine] = None) -> int:
    """Play one session and return the process exit code.

    Args:
        config: Session configuration
        engine: Prepared engine to drive instead of a fresh one
    """
    if engine is None:
        engine = ZooEngine(config)
    engine.events.subscribe(
        AnimalDiedEvent,
        lambda event: logger.info("Animal %r died (%s)", event.name, event.cause.value),
    )

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("HEADLESS ZOO SIMULATION - %s", config.zoo_name)
    logger.info("=" * SEPARATOR_WIDTH)

    stock_zoo(engine)
    while not engine.is_over:
        tend_zoo(engine)
        report = engine.advance_day()
        for line in report.event_log:
            logger.info("  %s", line)

    zoo = engine.zoo
    logger.info("=" * SEPARATOR_WIDTH)
    if engine.bankrupt:
        logger.info("BANKRUPTCY! The zoo closed on day %d.", zoo.day - 1)
    else:
        logger.info("Survived %d days with %d coins.", config.final_day, zoo.money)
    logger.info("=" * SEPARATOR_WIDTH)
    return 1 if engine.bankrupt else 0


def main():
    """Parse command-line arguments and run a headless session."""
    parser = argparse.ArgumentParser(
        description="Zoo Management Simulation (headless)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py
  python main.py --money 8000 --seed 42
  python main.py --days 10 --log-level DEBUG
        """,
    )
    parser.add_argument("--name", default=DEFAULT_ZOO_NAME, help="Zoo name")
    parser.add_argument("--money", type=int, default=DEFAULT_STARTING_MONEY, help="Starting money")
    parser.add_argument("--days", type=int, default=FINAL_DAY, help="Days to survive")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    config = ZooConfig(
        zoo_name=args.name,
        starting_money=args.money,
        seed=args.seed,
        final_day=args.days,
    )
    try:
        config.validate()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    sys.exit(run_headless(config))


if __name__ == "__main__":
    main()
