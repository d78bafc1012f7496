"""Error types shared by the accessors and the services.

Three kinds reach the caller unmodified:

- :class:`InvalidInputError` when caller-supplied data breaks a precondition,
  raised before any statement is executed;
- :class:`NotFoundError` when a requested or referenced entity is absent;
- :class:`PersistenceError` when the store rejects a statement, a write
  affects no rows, or the cursor cannot be released.
"""

from __future__ import annotations


class LibraryError(Exception):
    """Base class for all library backend errors."""


class InvalidInputError(LibraryError, ValueError):
    """Raised when caller-supplied data fails validation."""


class NotFoundError(LibraryError, LookupError):
    """Raised when a requested or referenced entity does not exist."""


class PersistenceError(LibraryError, RuntimeError):
    """Raised when the underlying store fails.

    The originating ``sqlite3.Error``, when there is one, is chained as
    ``__cause__``.
    """

    def __init__(self, message: str, *, action: str | None = None) -> None:
        super().__init__(message)
        self.action = action
