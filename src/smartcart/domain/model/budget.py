"""Budget — advisory per-session spending ceiling."""

from __future__ import annotations

from dataclasses import dataclass

from smartcart.domain.exceptions import InvalidBudget
from smartcart.domain.model.value_objects import Money


@dataclass
class Budget:
    """Exactly one per session.  ``limit`` is None while the budget is unset."""

    limit: Money | None = None

    @property
    def is_set(self) -> bool:
        return self.limit is not None

    def set(self, limit: Money) -> None:
        if limit.is_zero:
            raise InvalidBudget("Budget must be a positive number")
        self.limit = limit

    def clear(self) -> None:
        self.limit = None

    def allows(self, price: Money) -> bool:
        """Price-within-budget predicate used for catalog filtering."""
        if self.limit is None:
            return True
        return price <= self.limit
