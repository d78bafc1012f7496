from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from library_backend.domain.entities import Book
from library_backend.domain.exceptions import PersistenceError
from library_backend.domain.value_objects.enums import Genre

from ..books import BooksRepo
from .common import ensure_affected, register_casefold, scoped_cursor

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, author, genre, publication_year, isbn, is_available"


def _row_to_book(row: tuple) -> Book:
    # row: (id, title, author, genre, publication_year, isbn, is_available)
    try:
        genre = Genre(row[3])
    except ValueError as exc:
        raise PersistenceError(f"Unknown genre stored for book {row[0]}: {row[3]!r}") from exc
    return Book(
        id=row[0],
        title=row[1],
        author=row[2],
        genre=genre,
        publication_year=row[4],
        isbn=row[5],
        is_available=bool(row[6]),
    )


def _book_params(book: Book) -> tuple:
    return (
        book.title,
        book.author,
        book.genre.value,
        book.publication_year,
        book.isbn,
        int(bool(book.is_available)),
    )


class BooksRepoSqlite(BooksRepo):
    """SQLite implementation of :class:`BooksRepo`.

    The genre is stored by its symbolic name; ``is_available`` as ``0``/``1``.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn
        register_casefold(self._conn)
        with scoped_cursor(self._conn, "creating book table", commit=True) as cur:
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS book (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    author TEXT NOT NULL,
                    genre TEXT NOT NULL,
                    publication_year INTEGER,
                    isbn TEXT,
                    is_available INTEGER NOT NULL DEFAULT 1
                )
                """
            )

    def create(self, book: Book) -> int:
        with scoped_cursor(self._conn, "inserting book", commit=True) as cur:
            cur.execute(
                """
                INSERT INTO book (title, author, genre, publication_year, isbn, is_available)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                _book_params(book),
            )
            ensure_affected(cur, "No book was inserted.", action="inserting book")
            rowid = cur.lastrowid
        if rowid is None:
            raise PersistenceError("SQLite insert failed: no lastrowid (table: book)")
        logger.info("Book inserted", extra={"book_id": rowid})
        return int(rowid)

    def find_by_id(self, book_id: int) -> Optional[Book]:
        with scoped_cursor(self._conn, "fetching book") as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM book WHERE id = ?", (book_id,))
            row = cur.fetchone()
        if row is None:
            logger.debug("Book not found", extra={"book_id": book_id})
            return None
        return _row_to_book(row)

    def find_all(self) -> list[Book]:
        with scoped_cursor(self._conn, "listing books") as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM book")
            rows = cur.fetchall()
        return [_row_to_book(row) for row in rows]

    def search_by_query(self, query: str) -> list[Book]:
        needle = query.casefold()
        with scoped_cursor(self._conn, "searching books") as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM book
                WHERE instr(casefold(title), ?) > 0
                   OR instr(casefold(author), ?) > 0
                """,
                (needle, needle),
            )
            rows = cur.fetchall()
        return [_row_to_book(row) for row in rows]

    def update(self, book_id: int, book: Book) -> None:
        with scoped_cursor(self._conn, "updating book", commit=True) as cur:
            cur.execute(
                """
                UPDATE book
                SET title = ?, author = ?, genre = ?, publication_year = ?, isbn = ?, is_available = ?
                WHERE id = ?
                """,
                (*_book_params(book), book_id),
            )
            ensure_affected(cur, "No book was updated.", action="updating book")
        logger.info("Book updated", extra={"book_id": book_id})

    def delete(self, book_id: int) -> None:
        with scoped_cursor(self._conn, "deleting book", commit=True) as cur:
            cur.execute("DELETE FROM book WHERE id = ?", (book_id,))
            ensure_affected(cur, "No book was deleted.", action="deleting book")
        logger.info("Book deleted", extra={"book_id": book_id})
