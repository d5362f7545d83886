"""Integration tests for sign-up, login and logout."""

import pytest

from smartcart.application.login import LoginHandler, LogoutHandler
from smartcart.application.signup import SignupHandler
from smartcart.domain.exceptions import (
    InvalidCredentials,
    InvalidUsernameFormat,
    UsernameTaken,
    ValidationError,
)
from smartcart.domain.model.value_objects import Money
from tests.fakes import FakeUserRepository, make_product


def _repo() -> FakeUserRepository:
    return FakeUserRepository({"user": "user123"})


class TestSignup:

    def test_registers_user(self):
        repo = _repo()
        SignupHandler(repo).handle("bob_42", "secret")
        assert repo.get_password("bob_42") == "secret"

    @pytest.mark.parametrize("username", ["ab", "1abc", "abcdefghijklm", "bad-name", "a b c"])
    def test_invalid_username_format(self, username):
        with pytest.raises(InvalidUsernameFormat):
            SignupHandler(_repo()).handle(username, "secret")

    def test_username_taken(self):
        with pytest.raises(UsernameTaken, match="already exists"):
            SignupHandler(_repo()).handle("user", "other")

    def test_blank_fields(self):
        with pytest.raises(ValidationError, match="fill both"):
            SignupHandler(_repo()).handle("bob", "  ")


class TestLogin:

    def test_success_returns_fresh_session(self):
        session = LoginHandler(_repo()).handle("user", "user123")
        assert session.username == "user"
        assert session.cart.is_empty
        assert not session.budget.is_set

    def test_wrong_password(self):
        with pytest.raises(InvalidCredentials):
            LoginHandler(_repo()).handle("user", "nope")

    def test_unknown_user(self):
        with pytest.raises(InvalidCredentials):
            LoginHandler(_repo()).handle("ghost", "user123")

    def test_authenticate(self):
        login = LoginHandler(_repo())
        assert login.authenticate("user", "user123")
        assert not login.authenticate("user", "USER123")

    def test_signup_then_login(self):
        repo = _repo()
        SignupHandler(repo).handle("carol", "pw")
        assert LoginHandler(repo).handle("carol", "pw").username == "carol"


class TestLogout:

    def test_clears_cart_budget_and_user(self):
        session = LoginHandler(_repo()).handle("user", "user123")
        session.budget.set(Money.of("100"))
        session.cart.add(make_product())

        LogoutHandler().handle(session)

        assert session.cart.is_empty
        assert not session.budget.is_set
        assert not session.is_authenticated
