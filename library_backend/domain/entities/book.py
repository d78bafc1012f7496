from __future__ import annotations

from dataclasses import dataclass

from ..value_objects.enums import Genre


@dataclass
class Book:
    """A catalogue entry. ``genre`` is persisted by its symbolic name."""

    id: int | None
    title: str
    author: str
    genre: Genre
    publication_year: int | None = None
    isbn: str | None = None
    is_available: bool = True
