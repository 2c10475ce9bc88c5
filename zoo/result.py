"""Result type for explicit success/failure handling.

Player-facing operations never raise for expected failures (not enough money,
wrong enclosure, no breeding pair). They return a Result that the caller must
inspect, so every failure path is visible at the call site.

Usage:
------
    result = engine.buy_food(25)
    if result.is_err():
        show(result.error.message)

    match engine.sell_animal(enclosure_id, 0):
        case Ok(value):
            print(f"Sold for {value}")
        case Err(error):
            print(f"Sale rejected: {error.code.value}")

    gain = engine.run_advertising(200).unwrap_or(0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transformed value type


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful operation carrying its value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the success value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    @property
    def error(self) -> None:
        """Ok carries no error."""
        return None

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value.

        Example:
            Ok(3).map(lambda level: level * 10)  # Ok(30)
        """
        return Ok(f(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """A rejected operation carrying the reason."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise ValueError; an Err has no success value.

        Check is_ok() first.
        """
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    @property
    def value(self) -> None:
        """Err carries no value."""
        return None

    def map(self, f: Callable[[T], U]) -> "Err[E]":
        """No-op for Err."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


def ok() -> Ok[None]:
    """Create an Ok(None) for operations that succeed with no return value."""
    return Ok(None)
