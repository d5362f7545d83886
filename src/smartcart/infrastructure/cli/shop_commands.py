"""Interactive shopping session.

One process, one logged-in shopper: the cart, budget and reservations
live in memory for as long as the ``shop`` command runs.
"""

from __future__ import annotations

import shlex
from datetime import date, datetime, timedelta
from typing import Callable

import click

from smartcart.application.add_to_cart import AddToCartHandler
from smartcart.application.browse_catalog import BrowseCatalogHandler
from smartcart.application.cancel_reservation import CancelReservationHandler
from smartcart.application.dto import (
    CartDTO,
    CheckoutForm,
    OrderConfirmationDTO,
    OrderSummaryDTO,
    ReservationDTO,
)
from smartcart.application.login import LoginHandler, LogoutHandler
from smartcart.application.place_order import PlaceOrderHandler
from smartcart.application.preview_order import PreviewOrderHandler
from smartcart.application.purchase_reservation import PurchaseReservationHandler
from smartcart.application.remove_from_cart import RemoveFromCartHandler
from smartcart.application.reserve_product import ReserveProductHandler
from smartcart.application.set_budget import ClearBudgetHandler, SetBudgetHandler
from smartcart.application.show_cart import ShowCartHandler
from smartcart.application.show_reservations import ShowReservationsHandler
from smartcart.application.signup import SignupHandler
from smartcart.domain.exceptions import DomainException
from smartcart.domain.model.order import PHONE_PREFIX, PaymentMethod
from smartcart.domain.model.product import Category
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.repository.product_repository import ProductRepository
from smartcart.domain.repository.user_repository import UserRepository
from smartcart.infrastructure.bootstrap import product_repository, user_repository
from smartcart.infrastructure.cli.catalog_commands import display_products

HELP_TEXT = """\
Commands:
  catalog [electronics|clothing] [--affordable]
  budget <amount> | budget clear
  add <product-id>            remove <product-id>
  cart
  reserve <product-id> [YYYY-MM-DD]
  reservations                details <n>
  cancel <n>                  purchase <n>
  summary [cod|card|upi]      checkout
  logout                      quit"""

_PAYMENT_CHOICES = click.Choice(["cod", "card", "upi"], case_sensitive=False)


def _parse_position(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid reservation number '{raw}'.")


def _parse_date(raw: str) -> date:
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter("Invalid date format. Use YYYY-MM-DD.")


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty.")
    for item in dto.items:
        click.echo(f"  {item.id:<6} {item.name:<30} {str(item.price):>12}")
    click.echo(f"  {'Total':<37} {str(dto.total):>12}")
    if dto.budget_limit is None:
        click.echo("  Budget not set")
    else:
        click.echo(
            f"  Budget: {dto.budget_limit}  remaining {dto.budget_remaining}"
            f"  ({dto.budget_used_percent}% used)"
        )


def _display_reservation(dto: ReservationDTO) -> None:
    click.echo(f"Product: {dto.product_name}")
    click.echo(f"Price: {dto.product_price}")
    click.echo(f"Reserved on: {dto.reserved_on.isoformat()}")
    click.echo(f"Planned purchase date: {dto.planned_date.isoformat()}")
    click.echo(f"Reservation fee: {dto.fee}")
    click.echo(f"Status: {dto.status}")
    if dto.purchased_on is not None:
        click.echo(f"Purchased on: {dto.purchased_on.isoformat()}")
    if dto.refund is not None:
        click.echo(f"Refunded: {dto.refund}")


def _display_summary(dto: OrderSummaryDTO) -> None:
    click.echo("Items:")
    for line in dto.items:
        click.echo(f"- {line.product_name} ({line.price})")
    click.echo(f"Payment: {dto.payment_method}")
    if not dto.surcharge.is_zero:
        click.echo(f"Cash on delivery fee: {dto.surcharge}")
    click.echo(f"Total: {dto.total}")


def _display_confirmation(dto: OrderConfirmationDTO) -> None:
    click.echo("ORDER CONFIRMATION")
    click.echo()
    click.echo(f"Name: {dto.customer_name}")
    click.echo(f"Address: {dto.address}")
    click.echo(f"Phone: {PHONE_PREFIX} {dto.phone}")
    click.echo()
    _display_summary(dto.summary)
    if dto.masked_card_number is not None:
        click.echo(f"Card Number: {dto.masked_card_number}")
        click.echo(f"Expiry: {dto.card_expiry}")
    if dto.upi_id is not None:
        click.echo(f"UPI ID: {dto.upi_id}")
    click.echo()
    click.echo("Thank you for your order!")


class ShopShell:
    """Reads shopper commands and routes them to application handlers.

    Handlers raise DomainException for every expected failure; the
    shell echoes the message and keeps the session alive.
    """

    def __init__(
        self,
        session: ShoppingSession,
        product_repo: ProductRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.session = session
        self._product_repo = product_repo
        self._today = today
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "help": self._help,
            "catalog": self._catalog,
            "budget": self._budget,
            "add": self._add,
            "remove": self._remove,
            "cart": self._cart,
            "reserve": self._reserve,
            "reservations": self._reservations,
            "details": self._details,
            "cancel": self._cancel,
            "purchase": self._purchase,
            "summary": self._summary,
            "checkout": self._checkout,
        }

    def dispatch(self, line: str) -> bool:
        """Run one command.  Returns False when the session should end."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}")
            return True
        if not words:
            return True

        name, args = words[0].lower(), words[1:]
        if name in ("logout", "quit", "exit"):
            LogoutHandler().handle(self.session)
            click.echo("Logged out.")
            return False

        command = self._commands.get(name)
        if command is None:
            click.echo(f"Unknown command '{name}'. Type 'help' for a list.")
            return True

        try:
            command(args)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
        except click.BadParameter as exc:
            click.echo(f"Error: {exc.format_message()}")
        return True

    # --- Commands -------------------------------------------------------------

    def _help(self, args: list[str]) -> None:
        click.echo(HELP_TEXT)

    def _catalog(self, args: list[str]) -> None:
        category = None
        affordable = False
        for arg in args:
            if arg == "--affordable":
                affordable = True
            else:
                category = Category.parse(arg)
        handler = BrowseCatalogHandler(self._product_repo)
        display_products(
            handler.handle(self.session, category=category, within_budget=affordable)
        )

    def _budget(self, args: list[str]) -> None:
        if not args:
            raise click.BadParameter("Usage: budget <amount> | budget clear")
        if args[0].lower() == "clear":
            ClearBudgetHandler().handle(self.session)
            click.echo("Budget not set.")
            return
        amount = SetBudgetHandler().handle(self.session, args[0])
        click.echo(f"Budget set to {amount}")

    def _add(self, args: list[str]) -> None:
        product_id = self._require_arg(args, "add <product-id>").upper()
        dto = AddToCartHandler(self._product_repo).handle(self.session, product_id)
        name = next((item.name for item in dto.items if item.id == product_id), product_id)
        click.echo(f"{name} added to cart.")
        click.echo(f"Cart total: {dto.total}")

    def _remove(self, args: list[str]) -> None:
        product_id = self._require_arg(args, "remove <product-id>").upper()
        dto = RemoveFromCartHandler().handle(self.session, product_id)
        click.echo("Removed.")
        click.echo(f"Cart total: {dto.total}")

    def _cart(self, args: list[str]) -> None:
        _display_cart(ShowCartHandler().handle(self.session))

    def _reserve(self, args: list[str]) -> None:
        product_id = self._require_arg(args, "reserve <product-id> [YYYY-MM-DD]").upper()
        today = self._today()
        planned = _parse_date(args[1]) if len(args) > 1 else today + timedelta(days=7)
        dto = ReserveProductHandler(self._product_repo).handle(
            self.session, product_id, planned, today
        )
        click.echo(f"Reserved {dto.product_name}. Reservation fee: {dto.fee}")

    def _reservations(self, args: list[str]) -> None:
        dtos = ShowReservationsHandler().handle(self.session)
        if not dtos:
            click.echo("No reservations.")
            return
        click.echo(f"{'#':>3} {'Product':<30} {'Planned':<12} {'Fee':>12} {'Status':<10}")
        click.echo("-" * 71)
        for dto in dtos:
            click.echo(
                f"{dto.position:>3} {dto.product_name:<30} "
                f"{dto.planned_date.isoformat():<12} {str(dto.fee):>12} {dto.status:<10}"
            )

    def _details(self, args: list[str]) -> None:
        position = _parse_position(self._require_arg(args, "details <n>"))
        _display_reservation(ShowReservationsHandler().detail(self.session, position))

    def _cancel(self, args: list[str]) -> None:
        position = _parse_position(self._require_arg(args, "cancel <n>"))
        refund = CancelReservationHandler().handle(self.session, position, self._today())
        click.echo(f"Reservation cancelled. Refund: {refund}")

    def _purchase(self, args: list[str]) -> None:
        position = _parse_position(self._require_arg(args, "purchase <n>"))
        PurchaseReservationHandler().handle(self.session, position, self._today())
        name = self.session.reservations.get(position).product.name
        click.echo(f"{name} moved to cart. Proceed to checkout to complete purchase.")

    def _summary(self, args: list[str]) -> None:
        method = args[0] if args else "cod"
        _display_summary(PreviewOrderHandler().handle(self.session, method))

    def _checkout(self, args: list[str]) -> None:
        if self.session.cart.is_empty:
            click.echo("Cart is empty.")
            return

        name = click.prompt("Name", default="", show_default=False)
        address = click.prompt("Address", default="", show_default=False)
        phone = click.prompt(f"Phone {PHONE_PREFIX}", default="", show_default=False)
        method = click.prompt("Payment method", type=_PAYMENT_CHOICES, default="cod")

        card_number = card_expiry = card_cvv = upi_id = ""
        if PaymentMethod.parse(method) == PaymentMethod.CARD:
            card_number = click.prompt("Card number", default="", show_default=False)
            card_expiry = click.prompt("Expiry (MM/YY)", default="", show_default=False)
            card_cvv = click.prompt(
                "CVV", default="", show_default=False, hide_input=True
            )
        elif PaymentMethod.parse(method) == PaymentMethod.UPI:
            upi_id = click.prompt("UPI ID", default="", show_default=False)

        form = CheckoutForm(
            name=name,
            address=address,
            phone=phone,
            payment_method=method,
            card_number=card_number,
            card_expiry=card_expiry,
            card_cvv=card_cvv,
            upi_id=upi_id,
        )
        _display_confirmation(PlaceOrderHandler().handle(self.session, form))

    @staticmethod
    def _require_arg(args: list[str], usage: str) -> str:
        if not args:
            raise click.BadParameter(f"Usage: {usage}")
        return args[0]


def _login_or_signup(user_repo: UserRepository) -> ShoppingSession | None:
    login = LoginHandler(user_repo)
    signup = SignupHandler(user_repo)

    while True:
        action = click.prompt(
            "Action",
            type=click.Choice(["login", "signup", "quit"], case_sensitive=False),
            default="login",
        ).lower()
        if action == "quit":
            return None

        username = click.prompt("Username", default="", show_default=False)
        password = click.prompt(
            "Password", default="", show_default=False, hide_input=True
        )
        try:
            if action == "signup":
                signup.handle(username, password)
                click.echo("Signup successful, please log in.")
                continue
            return login.handle(username, password)
        except DomainException as exc:
            click.echo(f"Error: {exc}")


@click.command("shop")
def shop() -> None:
    """Start an interactive shopping session."""
    try:
        product_repo = product_repository()
        product_repo.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    session = _login_or_signup(user_repository())
    if session is None:
        return

    click.echo(f"Welcome, {session.username}!")
    shell = ShopShell(session, product_repo)
    limit = click.prompt(
        "Budget limit (blank to skip)", default="", show_default=False
    )
    if limit.strip():
        shell.dispatch(f"budget {limit.strip()}")
    click.echo("Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("smartcart", default="", show_default=False)
        except click.Abort:
            LogoutHandler().handle(session)
            break
        if not shell.dispatch(line):
            break
