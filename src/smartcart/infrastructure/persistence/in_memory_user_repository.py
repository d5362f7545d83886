"""Dict-backed UserRepository seeded from a JSON file.

Sign-ups live only as long as the process; the seed file is never
written back.
"""

from __future__ import annotations

import json
from pathlib import Path

from smartcart.domain.repository.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):

    def __init__(self, users: dict[str, str] | None = None) -> None:
        self._passwords: dict[str, str] = dict(users or {})

    @classmethod
    def from_json(cls, file_path: Path) -> InMemoryUserRepository:
        if not file_path.exists():
            return cls()
        raw = json.loads(file_path.read_text(encoding="utf-8"))
        return cls({item["username"]: item["password"] for item in raw})

    # --- UserRepository interface ---------------------------------------------

    def exists(self, username: str) -> bool:
        return username in self._passwords

    def get_password(self, username: str) -> str | None:
        return self._passwords.get(username)

    def add(self, username: str, password: str) -> None:
        self._passwords[username] = password
