"""Unit tests for the Budget and the BudgetGuard domain service."""

import pytest

from smartcart.domain.exceptions import BudgetExceeded, InvalidBudget
from smartcart.domain.model.budget import Budget
from smartcart.domain.model.cart import Cart
from smartcart.domain.model.value_objects import Money
from smartcart.domain.service.budget_guard import BudgetGuard
from tests.fakes import make_product


def _budget(limit: str | None) -> Budget:
    budget = Budget()
    if limit is not None:
        budget.set(Money.of(limit))
    return budget


class TestBudget:

    def test_unset_by_default(self):
        assert not Budget().is_set

    def test_zero_limit_rejected(self):
        with pytest.raises(InvalidBudget, match="positive"):
            Budget().set(Money.of("0"))

    def test_clear(self):
        budget = _budget("100")
        budget.clear()
        assert not budget.is_set
        assert budget.limit is None

    def test_allows_predicate(self):
        budget = _budget("100")
        assert budget.allows(Money.of("100"))
        assert not budget.allows(Money.of("100.01"))
        assert Budget().allows(Money.of("99999"))


class TestCanAdd:

    def test_unset_budget_allows_everything(self):
        cart = Cart([make_product("A", "5000")])
        assert BudgetGuard.can_add(make_product("B", "9999"), cart, Budget())

    def test_within_headroom(self):
        cart = Cart([make_product("A", "100")])
        assert BudgetGuard.can_add(make_product("B", "49.99"), cart, _budget("150"))

    def test_exactly_at_limit_allowed(self):
        cart = Cart([make_product("A", "100")])
        assert BudgetGuard.can_add(make_product("B", "50"), cart, _budget("150"))

    def test_over_headroom_rejected(self):
        cart = Cart([make_product("A", "100")])
        assert not BudgetGuard.can_add(make_product("B", "50.01"), cart, _budget("150"))


class TestCheck:

    def test_failure_carries_price_total_and_limit(self):
        cart = Cart([make_product("A", "100")])
        guard = BudgetGuard()

        with pytest.raises(BudgetExceeded) as info:
            guard.check(make_product("B", "60"), cart, _budget("150"))

        assert info.value.price == Money.of("60")
        assert info.value.current_total == Money.of("100")
        assert info.value.limit == Money.of("150")
        assert info.value.code == "budget_exceeded"

    def test_passes_silently_when_allowed(self):
        BudgetGuard().check(make_product("B", "60"), Cart(), _budget("60"))

    def test_passes_silently_without_budget(self):
        BudgetGuard().check(make_product("B", "60"), Cart([make_product("A", "100")]), Budget())


class TestHeadroom:

    def test_remaining_none_when_unset(self):
        assert BudgetGuard.remaining(Cart(), Budget()) is None

    def test_remaining(self):
        cart = Cart([make_product("A", "40")])
        assert BudgetGuard.remaining(cart, _budget("100")) == Money.of("60")

    def test_remaining_never_negative(self):
        cart = Cart([make_product("A", "140")])
        assert BudgetGuard.remaining(cart, _budget("100")) == Money.zero()

    def test_usage_percent(self):
        cart = Cart([make_product("A", "25")])
        assert BudgetGuard.usage_percent(cart, _budget("100")) == 25
        assert BudgetGuard.usage_percent(cart, Budget()) == 0

    def test_usage_percent_clamped(self):
        cart = Cart([make_product("A", "300")])
        assert BudgetGuard.usage_percent(cart, _budget("100")) == 100
