"""Zoo staff."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from zoo.config.economy import DIRECTOR_ROLE, EMPLOYEE_ROLES


@dataclass
class Employee:
    """A staff member.

    ``current_animals`` is a per-day capacity-utilization tally recomputed by
    the day cycle; it does not link the employee to particular animals.
    """

    name: str
    role: str
    salary: int
    max_animals: int
    current_animals: int = 0

    @classmethod
    def for_role(cls, name: str, role: str) -> Optional["Employee"]:
        """Build an employee with the salary and capacity of ``role``.

        Returns None for an unknown role.
        """
        terms = EMPLOYEE_ROLES.get(role)
        if terms is None:
            return None
        salary, max_animals = terms
        return cls(name=name, role=role, salary=salary, max_animals=max_animals)

    @property
    def is_director(self) -> bool:
        return self.role == DIRECTOR_ROLE

    @property
    def spare_capacity(self) -> int:
        return max(0, self.max_animals - self.current_animals)
