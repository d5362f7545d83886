"""Application service: Cancel Reservation use case.

The refund depends on how many days remain until the planned purchase
date at the moment of cancelling.  The fee itself is kept on the
reservation for history.
"""

from __future__ import annotations

import logging
from datetime import date

from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class CancelReservationHandler:

    def handle(self, session: ShoppingSession, position: int, today: date) -> Money:
        session.require_authenticated()

        reservation = session.reservations.get(position)
        refund = session.reservations.cancel(reservation, today)

        logger.info(
            "%s cancelled reservation #%d (refund %s)",
            session.username, position, refund,
        )
        return refund
