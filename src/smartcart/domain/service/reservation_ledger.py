"""Domain service: Reservation Ledger.

Keeps every reservation a shopper has made, in the order they were made,
and coordinates the transitions that touch more than one object.
Purchasing a reservation moves its product into the cart; the
reservation fee is not credited against, nor added to, the order total.

Reservations are never deleted: cancelled and purchased entries stay in
the ledger as history.
"""

from __future__ import annotations

from datetime import date

from smartcart.domain.exceptions import EntityNotFoundError
from smartcart.domain.model.cart import Cart
from smartcart.domain.model.product import Product
from smartcart.domain.model.reservation import Reservation
from smartcart.domain.model.value_objects import Money


class ReservationLedger:

    def __init__(self, reservations: list[Reservation] | None = None) -> None:
        self._reservations: list[Reservation] = list(reservations or [])

    def reserve(self, product: Product, planned_date: date, today: date) -> Reservation:
        """Create an ACTIVE reservation and append it to the ledger.

        Raises InvalidDate if ``planned_date`` is before ``today``.
        """
        reservation = Reservation.create(product, planned_date, today)
        self._reservations.append(reservation)
        return reservation

    def cancel(self, reservation: Reservation, today: date) -> Money:
        """Cancel an active reservation and return the refund.

        Raises AlreadyTerminal for cancelled or purchased reservations.
        """
        return reservation.cancel(today)

    def refund_for(self, reservation: Reservation, today: date) -> Money:
        """Refund that cancelling today would yield.  Does not cancel."""
        return reservation.refund_if_cancelled(today)

    def purchase_now(self, reservation: Reservation, cart: Cart, today: date) -> None:
        """Move the reserved product into the cart and close the reservation.

        The status check happens before the cart is touched so a
        terminal reservation leaves the cart unchanged.
        """
        reservation.mark_purchased(today)
        cart.add(reservation.product)

    def get(self, position: int) -> Reservation:
        """Return the reservation at 1-based ``position`` in listing order."""
        if position < 1 or position > len(self._reservations):
            raise EntityNotFoundError(f"Reservation #{position} not found")
        return self._reservations[position - 1]

    def list_all(self) -> list[Reservation]:
        return list(self._reservations)

    def __len__(self) -> int:
        return len(self._reservations)
