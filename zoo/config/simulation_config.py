"""Session configuration for a single zoo run."""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from zoo.config.economy import DEFAULT_STARTING_MONEY, DEFAULT_ZOO_NAME, FINAL_DAY
from zoo.config.market import MARKET_SIZE
from zoo.exceptions import ConfigurationError


@dataclass
class ZooConfig:
    """Configuration for one simulation session.

    Attributes:
        zoo_name: Display name of the zoo
        starting_money: Initial capital (must be >= 0)
        seed: Optional RNG seed; None gives a fresh, unseeded run
        final_day: The session is won once this day has been resolved
        market_size: Number of animals offered by the market
    """

    zoo_name: str = DEFAULT_ZOO_NAME
    starting_money: int = DEFAULT_STARTING_MONEY
    seed: Optional[int] = None
    final_day: int = FINAL_DAY
    market_size: int = MARKET_SIZE

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ZooConfig":
        """Create config from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def with_overrides(self, **overrides: Any) -> "ZooConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ConfigurationError: If any parameter is invalid
        """
        if not self.zoo_name.strip():
            raise ConfigurationError("zoo_name must not be empty")

        if self.starting_money < 0:
            raise ConfigurationError(
                f"starting_money must be >= 0, got {self.starting_money}"
            )

        if self.final_day < 1:
            raise ConfigurationError(f"final_day must be >= 1, got {self.final_day}")

        if self.market_size < 1:
            raise ConfigurationError(f"market_size must be >= 1, got {self.market_size}")
