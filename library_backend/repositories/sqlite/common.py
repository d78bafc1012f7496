"""Helpers shared by the SQLite accessors."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from datetime import date
from typing import Iterator, Optional

from library_backend.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

CASEFOLD_FUNCTION = "casefold"


@contextmanager
def scoped_cursor(
    conn: sqlite3.Connection, action: str, *, commit: bool = False
) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor that is closed on every exit path.

    Any ``sqlite3.Error`` raised by the statement (or by the commit when
    ``commit`` is true) becomes ``PersistenceError("Error <action>: ...")``.
    When ``commit`` is true, any failure rolls back the implicit transaction
    opened by the write. A failure while closing the cursor is reported as
    its own ``PersistenceError("Error closing cursor: ...")``.

    Example:
        >>> with scoped_cursor(conn, "fetching user") as cur:
        ...     cur.execute("SELECT 1")
    """
    try:
        cur = conn.cursor()
    except sqlite3.Error as exc:
        logger.error("Error %s: %s", action, exc)
        raise PersistenceError(f"Error {action}: {exc}", action=action) from exc
    try:
        yield cur
        if commit:
            conn.commit()
    except sqlite3.Error as exc:
        logger.error("Error %s: %s", action, exc)
        if commit:
            _rollback(conn, action)
        raise PersistenceError(f"Error {action}: {exc}", action=action) from exc
    except Exception:
        if commit:
            _rollback(conn, action)
        raise
    finally:
        try:
            cur.close()
        except sqlite3.Error as exc:
            logger.error("Error closing cursor after %s: %s", action, exc)
            raise PersistenceError(f"Error closing cursor: {exc}", action=action) from exc


def _rollback(conn: sqlite3.Connection, action: str) -> None:
    try:
        conn.rollback()
    except sqlite3.Error as exc:
        logger.error("Error rolling back after %s: %s", action, exc)
        raise PersistenceError(f"Error rolling back: {exc}", action=action) from exc


def _casefold(value: object) -> Optional[str]:
    if value is None:
        return None
    return str(value).casefold()


def register_casefold(conn: sqlite3.Connection) -> None:
    """Expose Unicode case folding to SQL as ``casefold(text)``.

    SQLite's own ``lower()`` and ``LIKE`` only fold ASCII letters.
    """
    conn.create_function(CASEFOLD_FUNCTION, 1, _casefold, deterministic=True)


def ensure_affected(cur: sqlite3.Cursor, message: str, *, action: str) -> None:
    """Raise :class:`PersistenceError` when the last write touched no rows."""
    if cur.rowcount == 0:
        logger.error(message)
        raise PersistenceError(message, action=action)


def date_to_db(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def date_from_db(value: object, *, column: str) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise PersistenceError(f"Invalid date stored in column {column}: {value!r}") from exc
