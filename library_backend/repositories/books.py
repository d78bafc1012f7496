from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from library_backend.domain.entities import Book


class BooksRepo(ABC):
    """Accessor interface for :class:`Book` entities."""

    @abstractmethod
    def create(self, book: Book) -> int:
        """Persist a new book and return the store-assigned identifier."""

    @abstractmethod
    def find_by_id(self, book_id: int) -> Optional[Book]:
        """Return a book by its identifier if present."""

    @abstractmethod
    def find_all(self) -> list[Book]:
        """Return every stored book."""

    @abstractmethod
    def search_by_query(self, query: str) -> list[Book]:
        """Return books whose title or author contain ``query``, ignoring case."""

    @abstractmethod
    def update(self, book_id: int, book: Book) -> None:
        """Overwrite every mutable field of the book identified by ``book_id``."""

    @abstractmethod
    def delete(self, book_id: int) -> None:
        """Remove the book identified by ``book_id``."""
