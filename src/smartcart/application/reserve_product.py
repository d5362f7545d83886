"""Application service: Reserve Product use case."""

from __future__ import annotations

import logging
from datetime import date

from smartcart.application.dto import ReservationDTO, reservation_to_dto
from smartcart.domain.exceptions import EntityNotFoundError
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ReserveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        session: ShoppingSession,
        product_id: str,
        planned_date: date,
        today: date,
    ) -> ReservationDTO:
        """Reserve a catalog product for ``planned_date``.

        The budget is not consulted: reserving charges only the fee,
        and the product reaches the cart later via purchase-now.
        """
        session.require_authenticated()

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        reservation = session.reservations.reserve(product, planned_date, today)
        logger.info(
            "%s reserved %s for %s (fee %s)",
            session.username, product.id, planned_date, reservation.fee,
        )
        return reservation_to_dto(len(session.reservations), reservation)
