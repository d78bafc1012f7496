from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from library_backend.domain.entities import User


class UsersRepo(ABC):
    """Accessor interface for :class:`User` entities."""

    @abstractmethod
    def create(self, user: User) -> int:
        """
        Persist a new user and return the store-assigned identifier.

        Example:
            >>> repo.create(User(None, "Ana", "ana@example.com", "+5511999990000"))
            1

        :param user: User to insert; ``user.id`` is ignored.
        :raises PersistenceError: if the insert fails or affects no rows.
        """

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by its identifier.

        :param user_id: Identifier of the user.
        :return: The user if found, otherwise ``None``.
        """

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every stored user; an empty list is a valid result."""

    @abstractmethod
    def search_by_query(self, query: str) -> list[User]:
        """Return users whose name, email or phone number contain ``query``, ignoring case."""

    @abstractmethod
    def update(self, user_id: int, user: User) -> None:
        """Overwrite every mutable field of the user identified by ``user_id``."""

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the user identified by ``user_id``."""
