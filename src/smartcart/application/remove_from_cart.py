"""Application service: Remove From Cart use case."""

from __future__ import annotations

import logging

from smartcart.application.dto import CartDTO, cart_to_dto
from smartcart.domain.model.session import ShoppingSession

logger = logging.getLogger(__name__)


class RemoveFromCartHandler:

    def handle(self, session: ShoppingSession, product_id: str) -> CartDTO:
        """Remove a product from the cart.  Unknown ids are ignored."""
        session.require_authenticated()
        if session.cart.contains(product_id):
            logger.info("%s removed %s from cart", session.username, product_id)
        session.cart.remove(product_id)
        return cart_to_dto(session.cart, session.budget)
