"""Error values returned by zoo operations.

Each :class:`ErrorCode` belongs to one :class:`ErrorCategory`:

- VALIDATION: the request itself is malformed (bad index, bad amount, unknown role)
- RESOURCE: the zoo lacks something the request needs (money, space, daily quota)
- DOMAIN: the request breaks a biological or placement rule

All of them are rejected before any state changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from zoo.result import Err


class ErrorCategory(Enum):
    """Broad classification of a rejected operation."""

    VALIDATION = "validation"
    RESOURCE = "resource"
    DOMAIN = "domain"


class ErrorCode(Enum):
    """Specific failure reasons surfaced to the caller."""

    INVALID_INDEX = "invalid_index"
    INVALID_AMOUNT = "invalid_amount"
    UNKNOWN_ROLE = "unknown_role"
    NO_SUCH_ENCLOSURE = "no_such_enclosure"
    NOT_FOUND = "not_found"
    NOT_INFECTED = "not_infected"

    INSUFFICIENT_FUNDS = "insufficient_funds"
    ENCLOSURE_FULL = "enclosure_full"
    DAILY_LIMIT_REACHED = "daily_limit_reached"
    MAX_LEVEL_REACHED = "max_level_reached"
    TOO_FEW_ANIMALS = "too_few_animals"

    INCOMPATIBLE_MATING = "incompatible_mating"
    INCOMPATIBLE_ENCLOSURE = "incompatible_enclosure"
    NO_ELIGIBLE_PAIR = "no_eligible_pair"
    PROTECTED_ROLE = "protected_role"

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self]


_CATEGORIES = {
    ErrorCode.INVALID_INDEX: ErrorCategory.VALIDATION,
    ErrorCode.INVALID_AMOUNT: ErrorCategory.VALIDATION,
    ErrorCode.UNKNOWN_ROLE: ErrorCategory.VALIDATION,
    ErrorCode.NO_SUCH_ENCLOSURE: ErrorCategory.VALIDATION,
    ErrorCode.NOT_FOUND: ErrorCategory.VALIDATION,
    ErrorCode.NOT_INFECTED: ErrorCategory.VALIDATION,
    ErrorCode.INSUFFICIENT_FUNDS: ErrorCategory.RESOURCE,
    ErrorCode.ENCLOSURE_FULL: ErrorCategory.RESOURCE,
    ErrorCode.DAILY_LIMIT_REACHED: ErrorCategory.RESOURCE,
    ErrorCode.MAX_LEVEL_REACHED: ErrorCategory.RESOURCE,
    ErrorCode.TOO_FEW_ANIMALS: ErrorCategory.RESOURCE,
    ErrorCode.INCOMPATIBLE_MATING: ErrorCategory.DOMAIN,
    ErrorCode.INCOMPATIBLE_ENCLOSURE: ErrorCategory.DOMAIN,
    ErrorCode.NO_ELIGIBLE_PAIR: ErrorCategory.DOMAIN,
    ErrorCode.PROTECTED_ROLE: ErrorCategory.DOMAIN,
}


@dataclass(frozen=True)
class ZooError:
    """A rejected operation.

    Attributes:
        code: Machine-readable reason
        message: Human-readable explanation for the menu layer
    """

    code: ErrorCode
    message: str

    @property
    def category(self) -> ErrorCategory:
        return self.code.category

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


def fail(code: ErrorCode, message: str) -> Err[ZooError]:
    """Build an ``Err`` wrapping a :class:`ZooError`."""
    return Err(ZooError(code, message))
