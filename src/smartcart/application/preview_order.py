"""Application service: Preview Order use case (query).

Shows the itemized order and total for a payment method without
validating any delivery or payment fields.
"""

from __future__ import annotations

from smartcart.application.dto import OrderSummaryDTO, summary_to_dto
from smartcart.domain.model.order import PaymentMethod
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.service.checkout_validator import CheckoutValidator


class PreviewOrderHandler:

    def __init__(self) -> None:
        self._validator = CheckoutValidator()

    def handle(self, session: ShoppingSession, payment_method: str) -> OrderSummaryDTO:
        session.require_authenticated()
        method = PaymentMethod.parse(payment_method)
        return summary_to_dto(self._validator.summarize(session.cart, method))
