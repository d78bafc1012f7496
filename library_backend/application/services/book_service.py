from __future__ import annotations

from library_backend.domain.entities import Book
from library_backend.domain.exceptions import InvalidInputError, NotFoundError
from library_backend.domain.value_objects.enums import Genre
from library_backend.repositories.books import BooksRepo

from .validation import require_query, require_text, validate_id


class BookService:
    """Validate book operations before delegating them to a :class:`BooksRepo`."""

    def __init__(self, books: BooksRepo) -> None:
        self._books = books

    def create(self, book: Book) -> int:
        self._validate_book(book)
        return self._books.create(book)

    def find_by_id(self, book_id: int) -> Book:
        validate_id(book_id, "Invalid book ID.")
        book = self._books.find_by_id(book_id)
        if book is None:
            raise NotFoundError("Book not found.")
        return book

    def find_all(self) -> list[Book]:
        # An empty catalogue is reported as NotFoundError, not as an empty list.
        books = self._books.find_all()
        if not books:
            raise NotFoundError("No books found.")
        return books

    def search(self, query: str) -> list[Book]:
        books = self._books.search_by_query(require_query(query))
        if not books:
            raise NotFoundError("No books found.")
        return books

    def update(self, book_id: int, book: Book) -> None:
        validate_id(book_id, "Invalid book ID.")
        self._validate_book(book)
        self.find_by_id(book_id)
        self._books.update(book_id, book)

    def delete(self, book_id: int) -> None:
        validate_id(book_id, "Invalid book ID.")
        self.find_by_id(book_id)
        self._books.delete(book_id)

    @staticmethod
    def _validate_book(book: Book | None) -> None:
        if book is None:
            raise InvalidInputError("Book must not be None.")
        require_text(book.title, "Book title is required.")
        require_text(book.author, "Book author is required.")
        if not isinstance(book.genre, Genre):
            raise InvalidInputError("Book genre is required.")
