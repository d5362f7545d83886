"""Reservation entity — holds a catalog item for a planned purchase date.

A reservation charges a fee up front.  Cancelling refunds all, half or
none of that fee depending on how close the planned date is.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from smartcart.domain.exceptions import AlreadyTerminal, InvalidDate
from smartcart.domain.model.product import Product
from smartcart.domain.model.value_objects import Money


class ReservationStatus(Enum):
    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"
    PURCHASED = "PURCHASED"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
FEE_RATE = Decimal("0.10")
MIN_FEE = Money(Decimal("5.00"))
FULL_REFUND_AFTER_DAYS = 7
PARTIAL_REFUND_RATE = Decimal("0.5")


def reservation_fee(price: Money) -> Money:
    """10% of the price rounded to cents, never below the minimum fee."""
    fee = price.scaled(FEE_RATE)
    minimum = Money(MIN_FEE.amount, price.currency)
    return fee if fee > minimum else minimum


def refund_amount(fee: Money, days_remaining: int) -> Money:
    """Full, half or no fee back.  The half refund is not rounded."""
    if days_remaining > FULL_REFUND_AFTER_DAYS:
        return fee
    if days_remaining >= 0:
        return Money(fee.amount * PARTIAL_REFUND_RATE, fee.currency)
    return Money(Decimal("0.00"), fee.currency)


@dataclass
class Reservation:
    """Entity with a one-way status machine.

    ACTIVE -> CANCELLED and ACTIVE -> PURCHASED are the only transitions;
    both targets are terminal.  ``fee`` never changes after creation.
    """

    product: Product
    reserved_on: date
    planned_date: date
    fee: Money
    status: ReservationStatus = ReservationStatus.ACTIVE
    purchased_on: date | None = None
    refund: Money | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(product: Product, planned_date: date, today: date) -> Reservation:
        if planned_date < today:
            raise InvalidDate("Planned date must be today or in future")
        return Reservation(
            product=product,
            reserved_on=today,
            planned_date=planned_date,
            fee=reservation_fee(product.price),
        )

    # --- State transitions ----------------------------------------------------

    def cancel(self, today: date) -> Money:
        """Transition ACTIVE -> CANCELLED and return the refund owed."""
        self._assert_active()
        refund = self.refund_if_cancelled(today)
        self.status = ReservationStatus.CANCELLED
        self.refund = refund
        return refund

    def mark_purchased(self, today: date) -> None:
        """Transition ACTIVE -> PURCHASED."""
        self._assert_active()
        self.status = ReservationStatus.PURCHASED
        self.purchased_on = today

    # --- Queries --------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    def days_remaining(self, today: date) -> int:
        return (self.planned_date - today).days

    def refund_if_cancelled(self, today: date) -> Money:
        return refund_amount(self.fee, self.days_remaining(today))

    def _assert_active(self) -> None:
        if not self.is_active:
            raise AlreadyTerminal(self.status.value)
