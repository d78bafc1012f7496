from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from library_backend.domain.entities import Loan
from library_backend.domain.exceptions import PersistenceError

from ..loans import LoansRepo
from .common import date_from_db, date_to_db, ensure_affected, scoped_cursor

logger = logging.getLogger(__name__)

_COLUMNS = "id, user_id, book_id, loan_date, due_date, return_date, is_returned"


def _row_to_loan(row: tuple) -> Loan:
    loan_date = date_from_db(row[3], column="loan_date")
    due_date = date_from_db(row[4], column="due_date")
    if loan_date is None or due_date is None:
        raise PersistenceError(f"Loan {row[0]} is missing its loan or due date")
    return Loan(
        id=row[0],
        user_id=row[1],
        book_id=row[2],
        loan_date=loan_date,
        due_date=due_date,
        return_date=date_from_db(row[5], column="return_date"),
        is_returned=bool(row[6]),
    )


def _loan_params(loan: Loan) -> tuple:
    return (
        loan.user_id,
        loan.book_id,
        date_to_db(loan.loan_date),
        date_to_db(loan.due_date),
        date_to_db(loan.return_date),
        int(bool(loan.is_returned)),
    )


class LoansRepoSqlite(LoansRepo):
    """SQLite implementation of :class:`LoansRepo`.

    Dates are stored as ISO ``YYYY-MM-DD`` strings. ``user_id`` and
    ``book_id`` carry no foreign key constraint.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        with scoped_cursor(self._conn, "creating loan table", commit=True) as cur:
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS loan (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL,
                    book_id INTEGER NOT NULL,
                    loan_date DATE NOT NULL,
                    due_date DATE NOT NULL,
                    return_date DATE,
                    is_returned INTEGER NOT NULL DEFAULT 0
                )
                """
            )

    def create(self, loan: Loan) -> int:
        with scoped_cursor(self._conn, "inserting loan", commit=True) as cur:
            cur.execute(
                """
                INSERT INTO loan (user_id, book_id, loan_date, due_date, return_date, is_returned)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                _loan_params(loan),
            )
            ensure_affected(cur, "No loan was inserted.", action="inserting loan")
            rowid = cur.lastrowid
        if rowid is None:
            raise PersistenceError("SQLite insert failed: no lastrowid (table: loan)")
        logger.info(
            "Loan inserted",
            extra={"loan_id": rowid, "user_id": loan.user_id, "book_id": loan.book_id},
        )
        return int(rowid)

    def find_by_id(self, loan_id: int) -> Optional[Loan]:
        with scoped_cursor(self._conn, "fetching loan") as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM loan WHERE id = ?", (loan_id,))
            row = cur.fetchone()
        if row is None:
            logger.debug("Loan not found", extra={"loan_id": loan_id})
            return None
        return _row_to_loan(row)

    def find_all(self) -> list[Loan]:
        with scoped_cursor(self._conn, "listing loans") as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM loan")
            rows = cur.fetchall()
        return [_row_to_loan(row) for row in rows]

    def update(self, loan_id: int, loan: Loan) -> None:
        with scoped_cursor(self._conn, "updating loan", commit=True) as cur:
            cur.execute(
                """
                UPDATE loan
                SET user_id = ?, book_id = ?, loan_date = ?, due_date = ?, return_date = ?,
                    is_returned = ?
                WHERE id = ?
                """,
                (*_loan_params(loan), loan_id),
            )
            ensure_affected(cur, "No loan was updated.", action="updating loan")
        logger.info("Loan updated", extra={"loan_id": loan_id})

    def delete(self, loan_id: int) -> None:
        with scoped_cursor(self._conn, "deleting loan", commit=True) as cur:
            cur.execute("DELETE FROM loan WHERE id = ?", (loan_id,))
            ensure_affected(cur, "No loan was deleted.", action="deleting loan")
        logger.info("Loan deleted", extra={"loan_id": loan_id})
