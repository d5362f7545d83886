"""Domain-level exceptions.

Every expected, user-correctable failure is a subclass of DomainException
carrying a stable ``code`` tag plus the structured details the presentation
layer needs to prompt a correction.  The CLI catches DomainException
uniformly and renders the message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartcart.domain.model.value_objects import Money


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "domain_error"


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    code = "validation_error"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "not_found"


# --- Cart / budget -------------------------------------------------------------


class EmptyCart(ValidationError):
    code = "empty_cart"

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class BudgetExceeded(ValidationError):
    """Adding an item would push the cart total past the budget limit."""

    code = "budget_exceeded"

    def __init__(self, price: Money, current_total: Money, limit: Money) -> None:
        self.price = price
        self.current_total = current_total
        self.limit = limit
        super().__init__(
            f"Cannot add item: exceeds your budget "
            f"(item price {price}, current total {current_total}, budget {limit})"
        )


class InvalidBudget(ValidationError):
    code = "invalid_budget"


# --- Reservations -------------------------------------------------------------


class InvalidDate(ValidationError):
    code = "invalid_date"


class AlreadyTerminal(ValidationError):
    """Cancel or purchase attempted on a reservation that is no longer active."""

    code = "already_terminal"

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"Reservation is already {status.lower()}")


# --- Checkout -----------------------------------------------------------------


class MissingDeliveryInfo(ValidationError):
    code = "missing_delivery_info"

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Please fill delivery details: {', '.join(fields)}")


class InvalidPhone(ValidationError):
    code = "invalid_phone"

    def __init__(self) -> None:
        super().__init__("Phone must be 9 digits after +971")


class InvalidCardDetails(ValidationError):
    """Card payment field failed validation.

    ``field`` is one of ``number``, ``expiry``, ``cvv``; ``reason`` is one
    of ``missing``, ``length``, ``format``, ``month``.
    """

    code = "invalid_card_details"

    def __init__(self, field: str, reason: str, message: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(message)


class InvalidUpiId(ValidationError):
    code = "invalid_upi_id"

    def __init__(self, reason: str, message: str) -> None:
        self.reason = reason
        super().__init__(message)


# --- Credentials (external collaborator contract) -----------------------------


class UsernameTaken(ValidationError):
    code = "username_taken"

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username '{username}' already exists")


class InvalidUsernameFormat(ValidationError):
    code = "invalid_username_format"

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            "Username invalid. Must start with a letter, 3-12 chars, "
            "letters/digits/underscore"
        )


class InvalidCredentials(DomainException):
    code = "invalid_credentials"

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class AuthenticationRequired(DomainException):
    code = "authentication_required"

    def __init__(self) -> None:
        super().__init__("You must be logged in to do that")
