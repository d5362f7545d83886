"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from smartcart.application.dto import CartDTO, cart_to_dto
from smartcart.domain.model.session import ShoppingSession


class ShowCartHandler:

    def handle(self, session: ShoppingSession) -> CartDTO:
        session.require_authenticated()
        return cart_to_dto(session.cart, session.budget)
