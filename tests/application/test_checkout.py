"""Integration tests for the PreviewOrder and PlaceOrder use cases."""

import pytest

from smartcart.application.dto import CheckoutForm
from smartcart.application.place_order import PlaceOrderHandler
from smartcart.application.preview_order import PreviewOrderHandler
from smartcart.application.set_budget import SetBudgetHandler
from smartcart.domain.exceptions import (
    EmptyCart,
    InvalidCardDetails,
    InvalidPhone,
    MissingDeliveryInfo,
    ValidationError,
)
from smartcart.domain.model.value_objects import Money
from tests.fakes import make_product, make_session


def _session_with_items():
    session = make_session()
    SetBudgetHandler().handle(session, "500")
    session.cart.add(make_product("E101", "249"))
    session.cart.add(make_product("C201", "99"))
    return session


def _form(**overrides) -> CheckoutForm:
    fields = dict(
        name="Alice",
        address="1 Palm St, Dubai",
        phone="501234567",
        payment_method="cod",
    )
    fields.update(overrides)
    return CheckoutForm(**fields)


class TestPreviewOrder:

    def test_works_with_incomplete_fields(self):
        session = _session_with_items()
        summary = PreviewOrderHandler().handle(session, "cod")
        assert [line.product_name for line in summary.items] == ["Product E101", "Product C201"]
        assert summary.total == Money.of("368")
        assert summary.payment_method == "Cash on Delivery"

    @pytest.mark.parametrize("method", ["card", "upi"])
    def test_no_surcharge(self, method):
        session = _session_with_items()
        assert PreviewOrderHandler().handle(session, method).total == Money.of("348")

    def test_empty_cart(self):
        with pytest.raises(EmptyCart):
            PreviewOrderHandler().handle(make_session(), "cod")

    def test_unknown_method(self):
        with pytest.raises(ValidationError, match="Unknown payment method"):
            PreviewOrderHandler().handle(_session_with_items(), "bitcoin")

    def test_preview_has_no_side_effects(self):
        session = _session_with_items()
        PreviewOrderHandler().handle(session, "cod")
        assert session.cart.size == 2
        assert session.budget.is_set


class TestPlaceOrder:

    def test_cod_order(self):
        session = _session_with_items()

        dto = PlaceOrderHandler().handle(session, _form())

        assert dto.total == Money.of("368.00")
        assert dto.summary.surcharge == Money.of("20.00")
        assert dto.customer_name == "Alice"
        assert dto.masked_card_number is None

    def test_success_clears_cart_and_budget(self):
        session = _session_with_items()
        PlaceOrderHandler().handle(session, _form())
        assert session.cart.is_empty
        assert not session.budget.is_set
        assert session.is_authenticated

    def test_card_order_is_masked(self):
        session = _session_with_items()
        dto = PlaceOrderHandler().handle(
            session,
            _form(
                payment_method="card",
                card_number="4111111111111111",
                card_expiry="08/27",
                card_cvv="123",
            ),
        )
        assert dto.masked_card_number == "****-****-****-1111"
        assert dto.total == Money.of("348")

    def test_upi_order(self):
        session = _session_with_items()
        dto = PlaceOrderHandler().handle(
            session, _form(payment_method="upi", upi_id="9876543210")
        )
        assert dto.upi_id == "9876543210"
        assert dto.total == Money.of("348")

    def test_delivery_fields_are_trimmed(self):
        session = _session_with_items()
        dto = PlaceOrderHandler().handle(session, _form(name="  Alice  ", phone=" 501234567 "))
        assert dto.customer_name == "Alice"
        assert dto.phone == "501234567"

    @pytest.mark.parametrize(
        "overrides, error",
        [
            ({"name": ""}, MissingDeliveryInfo),
            ({"phone": "12345"}, InvalidPhone),
            ({"payment_method": "card"}, InvalidCardDetails),
        ],
    )
    def test_failure_leaves_session_untouched(self, overrides, error):
        session = _session_with_items()

        with pytest.raises(error):
            PlaceOrderHandler().handle(session, _form(**overrides))

        assert session.cart.size == 2
        assert session.budget.limit == Money.of("500")

    def test_empty_cart(self):
        with pytest.raises(EmptyCart):
            PlaceOrderHandler().handle(make_session(), _form())
