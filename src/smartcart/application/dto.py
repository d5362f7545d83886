"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals.  Amounts stay as Money and dates as date;
rendering them is the presentation layer's concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from smartcart.domain.model.budget import Budget
from smartcart.domain.model.cart import Cart
from smartcart.domain.model.order import OrderConfirmation, OrderSummary
from smartcart.domain.model.product import Product
from smartcart.domain.model.reservation import Reservation
from smartcart.domain.model.value_objects import Money
from smartcart.domain.service.budget_guard import BudgetGuard


@dataclass(frozen=True)
class CheckoutForm:
    """Input: delivery and payment fields as typed by the shopper."""

    name: str
    address: str
    phone: str
    payment_method: str
    card_number: str = ""
    card_expiry: str = ""
    card_cvv: str = ""
    upi_id: str = ""


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: Money


@dataclass(frozen=True)
class CartDTO:
    items: list[ProductDTO]
    total: Money
    budget_limit: Money | None
    budget_remaining: Money | None
    budget_used_percent: int


@dataclass(frozen=True)
class ReservationDTO:
    position: int
    product_name: str
    product_price: Money
    reserved_on: date
    planned_date: date
    fee: Money
    status: str
    purchased_on: date | None
    refund: Money | None


@dataclass(frozen=True)
class OrderLineDTO:
    product_name: str
    price: Money


@dataclass(frozen=True)
class OrderSummaryDTO:
    items: list[OrderLineDTO]
    payment_method: str
    subtotal: Money
    surcharge: Money
    total: Money


@dataclass(frozen=True)
class OrderConfirmationDTO:
    customer_name: str
    address: str
    phone: str
    summary: OrderSummaryDTO
    masked_card_number: str | None
    card_expiry: str | None
    upi_id: str | None

    @property
    def total(self) -> Money:
        return self.summary.total


# --- Mapping -------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category.value,
        price=product.price,
    )


def cart_to_dto(cart: Cart, budget: Budget) -> CartDTO:
    return CartDTO(
        items=[product_to_dto(p) for p in cart.items],
        total=cart.total,
        budget_limit=budget.limit,
        budget_remaining=BudgetGuard.remaining(cart, budget),
        budget_used_percent=BudgetGuard.usage_percent(cart, budget),
    )


def reservation_to_dto(position: int, reservation: Reservation) -> ReservationDTO:
    return ReservationDTO(
        position=position,
        product_name=reservation.product.name,
        product_price=reservation.product.price,
        reserved_on=reservation.reserved_on,
        planned_date=reservation.planned_date,
        fee=reservation.fee,
        status=reservation.status.value,
        purchased_on=reservation.purchased_on,
        refund=reservation.refund,
    )


def summary_to_dto(summary: OrderSummary) -> OrderSummaryDTO:
    return OrderSummaryDTO(
        items=[
            OrderLineDTO(product_name=line.product_name, price=line.price)
            for line in summary.lines
        ],
        payment_method=summary.payment_method.value,
        subtotal=summary.subtotal,
        surcharge=summary.surcharge,
        total=summary.total,
    )


def confirmation_to_dto(confirmation: OrderConfirmation) -> OrderConfirmationDTO:
    return OrderConfirmationDTO(
        customer_name=confirmation.delivery.name,
        address=confirmation.delivery.address,
        phone=confirmation.delivery.phone,
        summary=summary_to_dto(confirmation.summary),
        masked_card_number=confirmation.masked_card_number,
        card_expiry=confirmation.card_expiry,
        upi_id=confirmation.upi_id,
    )
