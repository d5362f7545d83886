"""Application service: Place Order use case.

Orchestrates the CheckoutValidator (pure validation and pricing) and
the session side effects of a successful checkout:

1. Validate the cart and every delivery/payment field.
2. Build the immutable confirmation.
3. Clear the cart and reset the budget to unset.

A failure at step 1 leaves the session exactly as it was.
"""

from __future__ import annotations

import logging

from smartcart.application.dto import (
    CheckoutForm,
    OrderConfirmationDTO,
    confirmation_to_dto,
)
from smartcart.domain.model.order import DeliveryDetails, PaymentDetails, PaymentMethod
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.service.checkout_validator import CheckoutValidator

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self) -> None:
        self._validator = CheckoutValidator()

    def handle(self, session: ShoppingSession, form: CheckoutForm) -> OrderConfirmationDTO:
        session.require_authenticated()

        delivery = DeliveryDetails(name=form.name, address=form.address, phone=form.phone)
        payment = PaymentDetails(
            method=PaymentMethod.parse(form.payment_method),
            card_number=form.card_number,
            card_expiry=form.card_expiry,
            card_cvv=form.card_cvv,
            upi_id=form.upi_id,
        )

        confirmation = self._validator.confirm(session.cart, delivery, payment)

        session.cart.clear()
        session.budget.clear()

        logger.info(
            "%s placed order: %d item(s), %s, total %s",
            session.username,
            len(confirmation.summary.lines),
            payment.method.value,
            confirmation.total,
        )
        return confirmation_to_dto(confirmation)
