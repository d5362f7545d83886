"""Application service: Purchase Reservation Now use case.

Moves the reserved product into the cart so it can go through checkout.
The budget guard is not applied here, and the reservation fee is neither
credited nor charged at checkout.
"""

from __future__ import annotations

import logging
from datetime import date

from smartcart.application.dto import CartDTO, cart_to_dto
from smartcart.domain.model.session import ShoppingSession

logger = logging.getLogger(__name__)


class PurchaseReservationHandler:

    def handle(self, session: ShoppingSession, position: int, today: date) -> CartDTO:
        session.require_authenticated()

        reservation = session.reservations.get(position)
        session.reservations.purchase_now(reservation, session.cart, today)

        logger.info(
            "%s moved reserved %s to cart", session.username, reservation.product.id
        )
        return cart_to_dto(session.cart, session.budget)
