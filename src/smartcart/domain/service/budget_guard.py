"""Domain service: Budget Guard.

Decides whether a product may join the cart without breaking the
shopper's budget.  Holds no state of its own: it only reads the Cart
and the Budget it is given.
"""

from __future__ import annotations

from decimal import Decimal

from smartcart.domain.exceptions import BudgetExceeded
from smartcart.domain.model.budget import Budget
from smartcart.domain.model.cart import Cart
from smartcart.domain.model.product import Product
from smartcart.domain.model.value_objects import Money


class BudgetGuard:

    @staticmethod
    def can_add(product: Product, cart: Cart, budget: Budget) -> bool:
        """True when unset, or when the prospective total stays within the limit.

        Hitting the limit exactly is allowed.
        """
        if budget.limit is None:
            return True
        return cart.total + product.price <= budget.limit

    def check(self, product: Product, cart: Cart, budget: Budget) -> None:
        """Raise BudgetExceeded if ``product`` may not be added."""
        limit = budget.limit
        if limit is None:
            return
        if cart.total + product.price > limit:
            raise BudgetExceeded(
                price=product.price,
                current_total=cart.total,
                limit=limit,
            )

    @staticmethod
    def remaining(cart: Cart, budget: Budget) -> Money | None:
        """Headroom left under the limit, or None when no budget is set.

        An over-limit cart (reachable via purchase-now) reports zero.
        """
        if budget.limit is None:
            return None
        if cart.total >= budget.limit:
            return Money(Decimal("0.00"), budget.limit.currency)
        return budget.limit - cart.total

    @staticmethod
    def usage_percent(cart: Cart, budget: Budget) -> int:
        """Share of the budget used, clamped to 0..100."""
        if budget.limit is None:
            return 0
        used = cart.total.amount / budget.limit.amount * 100
        return max(0, min(100, int(used)))
