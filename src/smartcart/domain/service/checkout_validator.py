"""Domain service: Checkout Validator.

Stateless validation of delivery and payment input against the current
cart, plus the order summary (itemization and total) shown before and
after placing an order.

Checks run in a fixed order and the first failure wins:

  1. cart is not empty
  2. name, address and phone are filled in
  3. phone is exactly 9 digits
  4. payment-method-specific fields

Clearing the cart and resetting the budget after a successful checkout
is the caller's job; nothing here mutates its arguments.
"""

from __future__ import annotations

import re

from smartcart.domain.exceptions import (
    EmptyCart,
    InvalidCardDetails,
    InvalidPhone,
    InvalidUpiId,
    MissingDeliveryInfo,
)
from smartcart.domain.model.cart import Cart
from smartcart.domain.model.order import (
    COD_SURCHARGE,
    DeliveryDetails,
    OrderConfirmation,
    OrderLine,
    OrderSummary,
    PaymentDetails,
    PaymentMethod,
)
from smartcart.domain.model.value_objects import Money

_PHONE_RE = re.compile(r"^\d{9}$", re.ASCII)
_CARD_NUMBER_RE = re.compile(r"^\d{16}$", re.ASCII)
_CVV_RE = re.compile(r"^\d{3}$", re.ASCII)
_EXPIRY_RE = re.compile(r"^(\d{2})/(\d{2})$", re.ASCII)
_UPI_RE = re.compile(r"^\d{6,}$", re.ASCII)


def is_valid_expiry(mm_yy: str) -> bool:
    """``MM/YY`` with a month of 01-12.  The year is not checked."""
    match = _EXPIRY_RE.match(mm_yy)
    if match is None:
        return False
    return 1 <= int(match.group(1)) <= 12


def mask_card_number(card_number: str) -> str:
    """Show only the last four digits; values shorter than 4 pass through."""
    if len(card_number) < 4:
        return card_number
    return "****-****-****-" + card_number[-4:]


class CheckoutValidator:

    def summarize(self, cart: Cart, method: PaymentMethod) -> OrderSummary:
        """Itemize the cart and compute the total.

        Only the empty-cart check applies; delivery and payment fields
        may still be incomplete.
        """
        if cart.is_empty:
            raise EmptyCart()

        subtotal = cart.total
        if method == PaymentMethod.CASH_ON_DELIVERY:
            surcharge = Money(COD_SURCHARGE.amount, subtotal.currency)
        else:
            surcharge = Money.zero()

        return OrderSummary(
            lines=tuple(
                OrderLine(product_id=p.id, product_name=p.name, price=p.price)
                for p in cart.items
            ),
            payment_method=method,
            subtotal=subtotal,
            surcharge=surcharge,
            total=subtotal + surcharge,
        )

    def validate(
        self,
        cart: Cart,
        delivery: DeliveryDetails,
        payment: PaymentDetails,
    ) -> None:
        if cart.is_empty:
            raise EmptyCart()

        self._validate_delivery(delivery)

        if payment.method == PaymentMethod.CARD:
            self._validate_card(payment)
        elif payment.method == PaymentMethod.UPI:
            self._validate_upi(payment)

    def confirm(
        self,
        cart: Cart,
        delivery: DeliveryDetails,
        payment: PaymentDetails,
    ) -> OrderConfirmation:
        """Validate everything and build the immutable confirmation."""
        self.validate(cart, delivery, payment)

        normalized = DeliveryDetails(
            name=delivery.name.strip(),
            address=delivery.address.strip(),
            phone=delivery.phone.strip(),
        )
        summary = self.summarize(cart, payment.method)

        if payment.method == PaymentMethod.CARD:
            return OrderConfirmation(
                delivery=normalized,
                summary=summary,
                masked_card_number=mask_card_number(payment.card_number.strip()),
                card_expiry=payment.card_expiry.strip(),
            )
        if payment.method == PaymentMethod.UPI:
            return OrderConfirmation(
                delivery=normalized,
                summary=summary,
                upi_id=payment.upi_id.strip(),
            )
        return OrderConfirmation(delivery=normalized, summary=summary)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_delivery(delivery: DeliveryDetails) -> None:
        missing = [
            name
            for name, value in (
                ("name", delivery.name),
                ("address", delivery.address),
                ("phone", delivery.phone),
            )
            if not value or not value.strip()
        ]
        if missing:
            raise MissingDeliveryInfo(missing)

        if not _PHONE_RE.match(delivery.phone.strip()):
            raise InvalidPhone()

    @staticmethod
    def _validate_card(payment: PaymentDetails) -> None:
        number = payment.card_number.strip()
        expiry = payment.card_expiry.strip()
        cvv = payment.card_cvv.strip()

        for field_name, value in (("number", number), ("expiry", expiry), ("cvv", cvv)):
            if not value:
                raise InvalidCardDetails(
                    field_name, "missing", "Please fill all card details"
                )

        if not _CARD_NUMBER_RE.match(number):
            raise InvalidCardDetails("number", "length", "Card number must be 16 digits")
        if not _CVV_RE.match(cvv):
            raise InvalidCardDetails("cvv", "length", "CVV must be 3 digits")
        if not _EXPIRY_RE.match(expiry):
            raise InvalidCardDetails("expiry", "format", "Expiry must be in MM/YY format")
        if not is_valid_expiry(expiry):
            raise InvalidCardDetails("expiry", "month", "Expiry month must be 01-12")

    @staticmethod
    def _validate_upi(payment: PaymentDetails) -> None:
        upi_id = payment.upi_id.strip()
        if not upi_id:
            raise InvalidUpiId("missing", "Please fill UPI ID")
        if not _UPI_RE.match(upi_id):
            raise InvalidUpiId("format", "UPI ID must be digits (min 6)")
