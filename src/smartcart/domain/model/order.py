"""Checkout-time order snapshot.

Nothing here is persisted: an order exists only while its confirmation
is being shown.  Line items capture the price of each cart product at
checkout time.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from smartcart.domain.exceptions import ValidationError
from smartcart.domain.model.value_objects import Money


class PaymentMethod(Enum):
    CASH_ON_DELIVERY = "Cash on Delivery"
    CARD = "Card Payment"
    UPI = "UPI"

    @staticmethod
    def parse(raw: str) -> PaymentMethod:
        normalized = raw.strip().lower().replace("-", "_").replace(" ", "_")
        aliases = {
            "cod": PaymentMethod.CASH_ON_DELIVERY,
            "cash": PaymentMethod.CASH_ON_DELIVERY,
            "cash_on_delivery": PaymentMethod.CASH_ON_DELIVERY,
            "card": PaymentMethod.CARD,
            "card_payment": PaymentMethod.CARD,
            "upi": PaymentMethod.UPI,
        }
        if normalized not in aliases:
            raise ValidationError(f"Unknown payment method: {raw!r}")
        return aliases[normalized]


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
COD_SURCHARGE = Money(Decimal("20.00"))
PHONE_PREFIX = "+971"


@dataclass(frozen=True)
class DeliveryDetails:
    name: str
    address: str
    phone: str  # 9 local digits, without PHONE_PREFIX


@dataclass(frozen=True)
class PaymentDetails:
    """Payment method plus whichever fields that method needs."""

    method: PaymentMethod
    card_number: str = ""
    card_expiry: str = ""
    card_cvv: str = ""
    upi_id: str = ""


@dataclass(frozen=True)
class OrderLine:
    product_id: str
    product_name: str
    price: Money  # snapshot at checkout


@dataclass(frozen=True)
class OrderSummary:
    """Itemization and total, computed without validating any fields."""

    lines: tuple[OrderLine, ...]
    payment_method: PaymentMethod
    subtotal: Money
    surcharge: Money
    total: Money


@dataclass(frozen=True)
class OrderConfirmation:
    delivery: DeliveryDetails
    summary: OrderSummary
    masked_card_number: str | None = None
    card_expiry: str | None = None
    upi_id: str | None = None

    @property
    def total(self) -> Money:
        return self.summary.total
