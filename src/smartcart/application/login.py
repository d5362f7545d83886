"""Application services: Log In / Log Out use cases.

Logging in yields a fresh ShoppingSession; logging out empties the
cart, unsets the budget and detaches the user.
"""

from __future__ import annotations

import hmac
import logging

from smartcart.domain.exceptions import InvalidCredentials, ValidationError
from smartcart.domain.model.session import ShoppingSession
from smartcart.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class LoginHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def authenticate(self, username: str, password: str) -> bool:
        stored = self._user_repo.get_password(username.strip())
        if stored is None:
            return False
        return hmac.compare_digest(stored.encode(), password.encode())

    def handle(self, username: str, password: str) -> ShoppingSession:
        if not username.strip() or not password.strip():
            raise ValidationError("Fill both fields")

        if not self.authenticate(username, password):
            logger.warning("Failed login for %s", username.strip())
            raise InvalidCredentials()

        logger.info("%s logged in", username.strip())
        return ShoppingSession(username=username.strip())


class LogoutHandler:

    def handle(self, session: ShoppingSession) -> None:
        if session.is_authenticated:
            logger.info("%s logged out", session.username)
        session.end()
