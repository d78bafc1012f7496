from __future__ import annotations

from library_backend.domain.entities import User
from library_backend.domain.exceptions import InvalidInputError, NotFoundError
from library_backend.repositories.users import UsersRepo

from .validation import (
    is_blank,
    is_valid_email,
    is_valid_phone_number,
    require_query,
    require_text,
    validate_id,
)


class UserService:
    """Validate user operations before delegating them to a :class:`UsersRepo`.

    - Shape errors raise :class:`InvalidInputError` before any statement runs.
    - Absence reported by the accessor becomes :class:`NotFoundError`.
    - Store failures surface as the accessor's ``PersistenceError``.
    """

    def __init__(self, users: UsersRepo) -> None:
        self._users = users

    def create(self, user: User) -> int:
        self._validate_user(user)
        return self._users.create(user)

    def find_by_id(self, user_id: int) -> User:
        validate_id(user_id, "Invalid user ID.")
        user = self._users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    def find_all(self) -> list[User]:
        users = self._users.find_all()
        if not users:
            raise NotFoundError("No users found.")
        return users

    def search(self, query: str) -> list[User]:
        users = self._users.search_by_query(require_query(query))
        if not users:
            raise NotFoundError("No users found.")
        return users

    def update(self, user_id: int, user: User) -> None:
        validate_id(user_id, "Invalid user ID.")
        self._validate_user(user)
        self.find_by_id(user_id)
        self._users.update(user_id, user)

    def delete(self, user_id: int) -> None:
        validate_id(user_id, "Invalid user ID.")
        self.find_by_id(user_id)
        self._users.delete(user_id)

    @staticmethod
    def _validate_user(user: User | None) -> None:
        if user is None:
            raise InvalidInputError("User must not be None.")
        require_text(user.name, "User name is required.")
        if is_blank(user.email) or not is_valid_email(user.email):
            raise InvalidInputError("Invalid email.")
        if is_blank(user.phone_number) or not is_valid_phone_number(user.phone_number):
            raise InvalidInputError("Invalid phone number.")
