"""ShoppingSession — the explicit per-login context.

Cart, budget and reservation ledger belong to one logged-in user.  The
session is handed to every application handler rather than living in
module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from smartcart.domain.exceptions import AuthenticationRequired
from smartcart.domain.model.budget import Budget
from smartcart.domain.model.cart import Cart
from smartcart.domain.service.reservation_ledger import ReservationLedger


@dataclass
class ShoppingSession:
    username: str | None = None
    cart: Cart = field(default_factory=Cart)
    budget: Budget = field(default_factory=Budget)
    reservations: ReservationLedger = field(default_factory=ReservationLedger)

    @property
    def is_authenticated(self) -> bool:
        return self.username is not None

    def require_authenticated(self) -> None:
        if not self.is_authenticated:
            raise AuthenticationRequired()

    def end(self) -> None:
        """Detach the user and drop cart and budget state."""
        self.cart.clear()
        self.budget.clear()
        self.username = None
