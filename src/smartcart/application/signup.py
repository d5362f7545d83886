"""Application service: Sign Up use case."""

from __future__ import annotations

import logging
import re

from smartcart.domain.exceptions import (
    InvalidUsernameFormat,
    UsernameTaken,
    ValidationError,
)
from smartcart.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)

# Starts with a letter, 3-12 chars of letters/digits/underscore.
USERNAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]{2,11}$")


class SignupHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, username: str, password: str) -> None:
        username = username.strip()
        if not username or not password.strip():
            raise ValidationError("Please fill both fields")

        if not USERNAME_RE.match(username):
            raise InvalidUsernameFormat(username)

        if self._user_repo.exists(username):
            raise UsernameTaken(username)

        self._user_repo.add(username, password)
        logger.info("Registered user %s", username)
