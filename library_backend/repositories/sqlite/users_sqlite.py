from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from library_backend.domain.entities import User
from library_backend.domain.exceptions import PersistenceError

from ..users import UsersRepo
from .common import ensure_affected, register_casefold, scoped_cursor

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, email, phone_number"


def _row_to_user(row: tuple) -> User:
    return User(id=row[0], name=row[1], email=row[2], phone_number=row[3])


class UsersRepoSqlite(UsersRepo):
    """SQLite implementation of :class:`UsersRepo`.

    Example:
        >>> import sqlite3
        >>> conn = sqlite3.connect(":memory:")
        >>> repo = UsersRepoSqlite(conn)
        >>> user_id = repo.create(User(None, "Ana", "ana@example.com", "+5511999990000"))
        >>> repo.find_by_id(user_id)
        User(id=1, name='Ana', email='ana@example.com', phone_number='+5511999990000')
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        register_casefold(self._conn)
        with scoped_cursor(self._conn, "creating user table", commit=True) as cur:
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS user (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    email TEXT NOT NULL,
                    phone_number TEXT NOT NULL
                )
                """
            )

    def create(self, user: User) -> int:
        with scoped_cursor(self._conn, "inserting user", commit=True) as cur:
            cur.execute(
                "INSERT INTO user (name, email, phone_number) VALUES (?, ?, ?)",
                (user.name, user.email, user.phone_number),
            )
            ensure_affected(cur, "No user was inserted.", action="inserting user")
            rowid = cur.lastrowid
        if rowid is None:
            raise PersistenceError("SQLite insert failed: no lastrowid (table: user)")
        logger.info("User inserted", extra={"user_id": rowid})
        return int(rowid)

    def find_by_id(self, user_id: int) -> Optional[User]:
        with scoped_cursor(self._conn, "fetching user") as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM user WHERE id = ?", (user_id,))
            row = cur.fetchone()
        if row is None:
            logger.debug("User not found", extra={"user_id": user_id})
            return None
        return _row_to_user(row)

    def find_all(self) -> list[User]:
        with scoped_cursor(self._conn, "listing users") as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM user")
            rows = cur.fetchall()
        return [_row_to_user(row) for row in rows]

    def search_by_query(self, query: str) -> list[User]:
        needle = query.casefold()
        with scoped_cursor(self._conn, "searching users") as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM user
                WHERE instr(casefold(name), ?) > 0
                   OR instr(casefold(email), ?) > 0
                   OR instr(casefold(phone_number), ?) > 0
                """,
                (needle, needle, needle),
            )
            rows = cur.fetchall()
        return [_row_to_user(row) for row in rows]

    def update(self, user_id: int, user: User) -> None:
        with scoped_cursor(self._conn, "updating user", commit=True) as cur:
            cur.execute(
                "UPDATE user SET name = ?, email = ?, phone_number = ? WHERE id = ?",
                (user.name, user.email, user.phone_number, user_id),
            )
            ensure_affected(cur, "No user was updated.", action="updating user")
        logger.info("User updated", extra={"user_id": user_id})

    def delete(self, user_id: int) -> None:
        with scoped_cursor(self._conn, "deleting user", commit=True) as cur:
            cur.execute("DELETE FROM user WHERE id = ?", (user_id,))
            ensure_affected(cur, "No user was deleted.", action="deleting user")
        logger.info("User deleted", extra={"user_id": user_id})
