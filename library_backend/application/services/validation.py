"""Input checks shared by the services.

Every helper raises :class:`InvalidInputError` and never touches the store.
"""

from __future__ import annotations

import re
from typing import Any

from library_backend.domain.exceptions import InvalidInputError

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,7}$"
)
# Optional "+", up to four country-code digits, then 6-14 subscriber digits.
# Digits are ASCII 0-9 only.
PHONE_PATTERN = re.compile(r"^\+?\d{1,4}?\d{6,14}$", re.ASCII)


def is_positive_id(value: Any) -> bool:
    # bool is an int subclass but never a valid identifier
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_id(value: Any, message: str = "Invalid ID.") -> None:
    if not is_positive_id(value):
        raise InvalidInputError(message)


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def require_text(value: Any, message: str) -> None:
    if is_blank(value):
        raise InvalidInputError(message)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone_number(phone_number: str) -> bool:
    return PHONE_PATTERN.fullmatch(phone_number) is not None


def require_query(query: Any) -> str:
    """Return ``query`` unchanged, rejecting ``None`` and blank input.

    Only the emptiness check ignores surrounding whitespace; the query
    itself is searched as given.
    """
    if is_blank(query):
        raise InvalidInputError("Search query must not be empty.")
    return query
