"""Application service: Add To Cart use case.

Every addition passes through the BudgetGuard first.  A rejected
addition leaves the cart untouched and surfaces the item price, current
total and limit through BudgetExceeded.
"""

from __future__ import annotations

import logging

from smartcart.application.dto import CartDTO, cart_to_dto
from smartcart.domain.exceptions import BudgetExceeded, EntityNotFoundError
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.repository.product_repository import ProductRepository
from smartcart.domain.service.budget_guard import BudgetGuard

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._guard = BudgetGuard()

    def handle(self, session: ShoppingSession, product_id: str) -> CartDTO:
        session.require_authenticated()

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        try:
            self._guard.check(product, session.cart, session.budget)
        except BudgetExceeded as exc:
            logger.warning(
                "Budget exceeded for %s: price=%s total=%s limit=%s",
                session.username, exc.price, exc.current_total, exc.limit,
            )
            raise

        session.cart.add(product)
        logger.info("%s added %s to cart", session.username, product.id)
        return cart_to_dto(session.cart, session.budget)
