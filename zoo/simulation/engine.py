"""Zoo engine: the operation surface used by menus and drivers.

The engine owns one zoo, one RNG and one event bus. Player actions are
validated completely before anything changes; a rejected action returns
``Err(ZooError)`` and leaves the zoo exactly as it was. The only way to move
time forward is :meth:`ZooEngine.advance_day`. Once the session is over (bankrupt
or completed), every operation that changes the zoo raises
:class:`~zoo.exceptions.SessionEndedError`.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from zoo import market, valuation
from zoo.config.economy import HIREABLE_ROLES
from zoo.config.market import DAILY_PURCHASE_LIMIT, FREE_MARKET_DAYS
from zoo.config.simulation_config import ZooConfig
from zoo.entities.animal import Animal, Climate
from zoo.entities.employee import Employee
from zoo.entities.enclosure import Enclosure
from zoo.entities.zoo import Zoo
from zoo.errors import ErrorCode, ZooError, fail
from zoo.events.domain_events import AnimalBornEvent
from zoo.events.event_bus import EventBus
from zoo.exceptions import SessionEndedError
from zoo.genetics.reproduction import breed_animals
from zoo.result import Err, Ok, Result, ok
from zoo.simulation.day_context import DayReport
from zoo.simulation.day_cycle import DayPipeline, advance_day

logger = logging.getLogger(__name__)


class ZooEngine:
    """Runs a single zoo session.

    Attributes:
        config: Session configuration
        rng: The only source of randomness for the session
        events: Event bus receiving domain events
        zoo: The zoo aggregate
        bankrupt: The session ended in bankruptcy
        completed: The final day was survived
    """

    def __init__(
        self,
        config: Optional[ZooConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        events: Optional[EventBus] = None,
        pipeline: Optional[DayPipeline] = None,
    ) -> None:
        """Initialize the engine and create the zoo.

        Args:
            config: Session configuration (defaults to ZooConfig())
            rng: Shared RNG; takes precedence over any seed
            seed: Seed override (falls back to config.seed)
            events: Event bus to publish to (a private one is created otherwise)
            pipeline: Custom day-cycle pipeline
        """
        self.config = config or ZooConfig()
        self.config.validate()

        if rng is not None:
            self.rng: random.Random = rng
        else:
            effective_seed = seed if seed is not None else self.config.seed
            self.rng = random.Random(effective_seed)

        self.events = events or EventBus()
        self._pipeline = pipeline
        self.bankrupt = False
        self.completed = False

        self.zoo = Zoo(self.config.zoo_name, self.config.starting_money)
        self.zoo.market = market.generate_pool(self.rng, self.config.market_size)
        logger.info(
            "Zoo %r opened with %d coins (final day %d)",
            self.zoo.name,
            self.zoo.money,
            self.config.final_day,
        )

    @property
    def is_over(self) -> bool:
        return self.bankrupt or self.completed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def total_animals(self) -> int:
        return self.zoo.total_animals()

    def get_enclosure(self, enclosure_id: int) -> Optional[Enclosure]:
        return self.zoo.get_enclosure(enclosure_id)

    def find_animal(self, name: str) -> Optional[Tuple[Enclosure, Animal]]:
        return self.zoo.find_animal(name)

    def suitable_enclosures(self, animal: Animal) -> List[Enclosure]:
        """Enclosures that could take ``animal`` right now."""
        return [enclosure for enclosure in self.zoo.enclosures if enclosure.can_add(animal)]

    # ------------------------------------------------------------------
    # Animals
    # ------------------------------------------------------------------

    def _purchase_limit_reached(self) -> bool:
        return self.zoo.day > FREE_MARKET_DAYS and self.zoo.animals_bought_today >= DAILY_PURCHASE_LIMIT

    def buy_animal(self, market_index: int, name: str, enclosure_id: int) -> Result[Animal, ZooError]:
        """Buy a market animal, name it and place it in an enclosure."""
        self._require_active("buy_animal")
        zoo = self.zoo
        if self._purchase_limit_reached():
            return self._reject(
                fail(ErrorCode.DAILY_LIMIT_REACHED, f"After day {FREE_MARKET_DAYS} only one animal per day")
            )
        if not 0 <= market_index < len(zoo.market):
            return self._reject(fail(ErrorCode.INVALID_INDEX, f"No market animal #{market_index}"))

        candidate = zoo.market[market_index]
        cost = valuation.price(candidate)
        if zoo.money < cost:
            return self._reject(fail(ErrorCode.INSUFFICIENT_FUNDS, f"Animal costs {cost} coins"))

        enclosure = zoo.get_enclosure(enclosure_id)
        if enclosure is None:
            return self._reject(fail(ErrorCode.NO_SUCH_ENCLOSURE, f"No enclosure {enclosure_id}"))
        placement = enclosure.check_placement(candidate)
        if placement.is_err():
            return self._reject(placement)

        animal = zoo.market.pop(market_index)
        animal.name = name
        enclosure.add_animal(animal).unwrap()
        zoo.money -= cost
        zoo.animals_bought_today += 1
        logger.info("Bought %r (%s) for %d coins", name, animal.species, cost)
        return Ok(animal)

    def sell_animal(self, enclosure_id: int, animal_index: int) -> Result[int, ZooError]:
        """Sell an animal for 80% of its price.

        Returns:
            Ok(coins received)
        """
        self._require_active("sell_animal")
        enclosure = self.zoo.get_enclosure(enclosure_id)
        if enclosure is None or enclosure.animal_at(animal_index) is None:
            return self._reject(
                fail(ErrorCode.NOT_FOUND, f"No animal #{animal_index} in enclosure {enclosure_id}")
            )
        animal = enclosure.remove_at(animal_index)
        value = valuation.sell_value(animal)
        self.zoo.money += value
        logger.info("Sold %r for %d coins", animal.name, value)
        return Ok(value)

    def cure_animal(self, name: str) -> Result[None, ZooError]:
        """Cure an infected animal, found by name."""
        self._require_active("cure_animal")
        found = self.zoo.find_animal(name)
        if found is None:
            return self._reject(fail(ErrorCode.NOT_FOUND, f'Animal "{name}" not found'))
        _, animal = found
        if not animal.is_infected:
            return self._reject(fail(ErrorCode.NOT_INFECTED, f'Animal "{name}" is not infected'))
        cost = valuation.cure_cost()
        if self.zoo.money < cost:
            return self._reject(fail(ErrorCode.INSUFFICIENT_FUNDS, f"Treatment costs {cost} coins"))
        animal.cure()
        self.zoo.money -= cost
        logger.info("Cured %r for %d coins", name, cost)
        return ok()

    def breed_in_enclosure(
        self,
        enclosure_id: int,
        parent_a_index: int,
        parent_b_index: int,
        offspring_names: Sequence[str] = (),
    ) -> Result[List[Animal], ZooError]:
        """Breed animals in an enclosure.

        The two chosen indexes must be distinct and valid, but the pair that
        actually breeds is the first eligible pair in the enclosure.
        """
        self._require_active("breed_in_enclosure")
        enclosure = self.zoo.get_enclosure(enclosure_id)
        if enclosure is None:
            return self._reject(fail(ErrorCode.NO_SUCH_ENCLOSURE, f"No enclosure {enclosure_id}"))
        if enclosure.size < 2:
            return self._reject(fail(ErrorCode.TOO_FEW_ANIMALS, "Not enough animals to breed"))
        if (
            enclosure.animal_at(parent_a_index) is None
            or enclosure.animal_at(parent_b_index) is None
            or parent_a_index == parent_b_index
        ):
            return self._reject(fail(ErrorCode.INVALID_INDEX, "Choose two different animals"))

        result = breed_animals(enclosure, self.rng, offspring_names)
        if result.is_err():
            return self._reject(result)
        for child in result.value:
            self.events.emit(
                AnimalBornEvent(child.name, child.species, enclosure_id, child.parents, self.zoo.day)
            )
        logger.info("%d offspring born in enclosure %d", len(result.value), enclosure_id)
        return result

    def rename_animal(self, enclosure_id: int, animal_index: int, new_name: str) -> Result[None, ZooError]:
        self._require_active("rename_animal")
        enclosure = self.zoo.get_enclosure(enclosure_id)
        if enclosure is None:
            return self._reject(fail(ErrorCode.NO_SUCH_ENCLOSURE, f"No enclosure {enclosure_id}"))
        animal = enclosure.animal_at(animal_index)
        if animal is None:
            return self._reject(fail(ErrorCode.NOT_FOUND, f"No animal #{animal_index}"))
        animal.name = new_name
        return ok()

    # ------------------------------------------------------------------
    # Enclosures
    # ------------------------------------------------------------------

    def build_enclosure(self, climate: Climate, capacity: int) -> Result[Enclosure, ZooError]:
        self._require_active("build_enclosure")
        if capacity < 1:
            return self._reject(fail(ErrorCode.INVALID_AMOUNT, "Capacity must be at least 1"))
        cost = valuation.enclosure_construction_cost(climate, capacity)
        if self.zoo.money < cost:
            return self._reject(fail(ErrorCode.INSUFFICIENT_FUNDS, f"Enclosure costs {cost} coins"))
        enclosure = self.zoo.add_enclosure(climate, capacity)
        self.zoo.money -= cost
        logger.info("Built %s enclosure %d for %d coins", climate.label, enclosure.enclosure_id, cost)
        return Ok(enclosure)

    def upgrade_enclosure(self, enclosure_id: int) -> Result[int, ZooError]:
        """Upgrade an enclosure.

        Returns:
            Ok(new level)
        """
        self._require_active("upgrade_enclosure")
        enclosure = self.zoo.get_enclosure(enclosure_id)
        if enclosure is None:
            return self._reject(fail(ErrorCode.NO_SUCH_ENCLOSURE, f"No enclosure {enclosure_id}"))
        if not enclosure.can_upgrade:
            return self._reject(fail(ErrorCode.MAX_LEVEL_REACHED, "Maximum upgrade level reached"))
        cost = enclosure.upgrade_cost()
        if self.zoo.money < cost:
            return self._reject(fail(ErrorCode.INSUFFICIENT_FUNDS, f"Upgrade costs {cost} coins"))
        level = enclosure.upgrade()
        self.zoo.money -= cost
        logger.info("Enclosure %d upgraded to level %d", enclosure_id, level)
        return Ok(level)

    # ------------------------------------------------------------------
    # Staff
    # ------------------------------------------------------------------

    def hire_employee(self, name: str, role: str) -> Result[Employee, ZooError]:
        """Hire a Cleaner, Veterinarian or Feeder; the first salary is paid up front."""
        self._require_active("hire_employee")
        employee = Employee.for_role(name, role) if role in HIREABLE_ROLES else None
        if employee is None:
            return self._reject(fail(ErrorCode.UNKNOWN_ROLE, f"Unknown role {role!r}"))
        if self.zoo.money < employee.salary:
            return self._reject(fail(ErrorCode.INSUFFICIENT_FUNDS, f"Hiring costs {employee.salary} coins"))
        self.zoo.employees.append(employee)
        self.zoo.money -= employee.salary
        logger.info("Hired %r as %s", name, role)
        return Ok(employee)

    def fire_employee(self, index: int) -> Result[None, ZooError]:
        """Fire the employee at ``index`` in the staff list; the Director is protected."""
        self._require_active("fire_employee")
        if not 0 <= index < len(self.zoo.employees):
            return self._reject(fail(ErrorCode.INVALID_INDEX, f"No employee #{index}"))
        employee = self.zoo.employees[index]
        if employee.is_director:
            return self._reject(fail(ErrorCode.PROTECTED_ROLE, "The Director cannot be fired"))
        del self.zoo.employees[index]
        logger.info("Fired %r", employee.name)
        return ok()

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    def buy_food(self, kg: int) -> Result[None, ZooError]:
        self._require_active("buy_food")
        if kg <= 0:
            return self._reject(fail(ErrorCode.INVALID_AMOUNT, "Amount must be positive"))
        cost = valuation.food_cost(kg)
        if self.zoo.money < cost:
            return self._reject(fail(ErrorCode.INSUFFICIENT_FUNDS, f"{kg} kg of food costs {cost} coins"))
        self.zoo.food += kg
        self.zoo.money -= cost
        return ok()

    def run_advertising(self, spend: int) -> Result[int, ZooError]:
        """Spend money on advertising.

        Returns:
            Ok(popularity gained)
        """
        self._require_active("run_advertising")
        if spend <= 0:
            return self._reject(fail(ErrorCode.INVALID_AMOUNT, "Amount must be positive"))
        if self.zoo.money < spend:
            return self._reject(fail(ErrorCode.INSUFFICIENT_FUNDS, "Not enough money"))
        gain = valuation.advertising_gain(spend)
        self.zoo.money -= spend
        self.zoo.popularity += gain
        return Ok(gain)

    def refresh_market(self) -> Result[None, ZooError]:
        self._require_active("refresh_market")
        result = market.refresh_market(self.zoo, self.rng, self.config.market_size)
        if result.is_err():
            return self._reject(result)
        return result

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def advance_day(self) -> DayReport:
        """Resolve the current day.

        Raises:
            SessionEndedError: If the session already ended
        """
        self._require_active("advance_day")
        report = advance_day(
            self.zoo,
            self.rng,
            bus=self.events,
            final_day=self.config.final_day,
            pipeline=self._pipeline,
        )
        self.bankrupt = report.bankrupt
        self.completed = report.completed
        if self.completed:
            logger.info("Congratulations! %r survived %d days", self.zoo.name, self.config.final_day)
        return report

    def _require_active(self, operation: str) -> None:
        """Raise SessionEndedError once the session is bankrupt or completed.

        Every operation that changes the zoo calls this first.
        """
        if self.is_over:
            raise SessionEndedError(
                f"Cannot {operation}: session is over "
                f"(bankrupt={self.bankrupt}, completed={self.completed})"
            )

    def _reject(self, result: Err[ZooError]) -> Err[ZooError]:
        logger.debug("Rejected: %s", result.error)
        return result
