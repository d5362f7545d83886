"""Application service: Set / Clear Budget use cases."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from smartcart.domain.exceptions import InvalidBudget
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class SetBudgetHandler:

    def handle(self, session: ShoppingSession, limit: str) -> Money:
        """Parse and apply a budget limit.

        Anything that is not a positive number raises InvalidBudget and
        leaves the budget unset, matching what a dismissed prompt does.
        """
        session.require_authenticated()
        try:
            value = Decimal(limit.strip())
        except (InvalidOperation, ValueError) as exc:
            session.budget.clear()
            raise InvalidBudget("Invalid number. Budget not set") from exc

        if not value.is_finite() or value <= 0:
            session.budget.clear()
            raise InvalidBudget("Budget must be a positive number")

        amount = Money(value)
        session.budget.set(amount)
        logger.info("%s set budget to %s", session.username, amount)
        return amount


class ClearBudgetHandler:

    def handle(self, session: ShoppingSession) -> None:
        session.require_authenticated()
        session.budget.clear()
        logger.info("%s cleared budget", session.username)
