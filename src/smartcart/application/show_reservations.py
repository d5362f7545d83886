"""Application service: Show Reservations use case (query)."""

from __future__ import annotations

from datetime import date

from smartcart.application.dto import ReservationDTO, reservation_to_dto
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.model.value_objects import Money


class ShowReservationsHandler:

    def handle(self, session: ShoppingSession) -> list[ReservationDTO]:
        """Every reservation in the order it was made, terminal ones included."""
        session.require_authenticated()
        return [
            reservation_to_dto(position, reservation)
            for position, reservation in enumerate(session.reservations.list_all(), start=1)
        ]

    def detail(self, session: ShoppingSession, position: int) -> ReservationDTO:
        session.require_authenticated()
        return reservation_to_dto(position, session.reservations.get(position))

    def refund_preview(self, session: ShoppingSession, position: int, today: date) -> Money:
        """Refund a cancellation today would yield, without cancelling."""
        session.require_authenticated()
        reservation = session.reservations.get(position)
        return session.reservations.refund_for(reservation, today)
