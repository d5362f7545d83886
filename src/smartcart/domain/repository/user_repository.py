"""Abstract repository for stored credentials.

Lookups are by username key; implementations are expected to answer
``get_password`` and ``exists`` without scanning.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class UserRepository(ABC):

    @abstractmethod
    def exists(self, username: str) -> bool:
        """Return True if the username is registered."""

    @abstractmethod
    def get_password(self, username: str) -> str | None:
        """Return the stored password for a username, or None."""

    @abstractmethod
    def add(self, username: str, password: str) -> None:
        """Register a new user."""
