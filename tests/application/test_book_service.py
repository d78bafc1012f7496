# mypy: ignore-errors

from __future__ import annotations

import sqlite3
from dataclasses import replace

import pytest

from library_backend.application.services import BookService
from library_backend.domain.entities import Book
from library_backend.domain.exceptions import InvalidInputError, NotFoundError
from library_backend.domain.value_objects.enums import Genre
from library_backend.repositories.books import BooksRepo
from library_backend.repositories.sqlite import BooksRepoSqlite

DUNE = Book(None, "Dune", "Frank Herbert", Genre.SCIENCE_FICTION, 1965, "978-0441013593")
HOBBIT = Book(None, "The Hobbit", "J. R. R. Tolkien", Genre.FANTASY, 1937)


class _RecordingBooksRepo(BooksRepo):
    def __init__(self) -> None:
        self.calls: list[str] = []

    def create(self, book):
        self.calls.append("create")
        return 1

    def find_by_id(self, book_id):
        self.calls.append("find_by_id")
        return None

    def find_all(self):
        self.calls.append("find_all")
        return []

    def search_by_query(self, query):
        self.calls.append("search_by_query")
        return []

    def update(self, book_id, book):
        self.calls.append("update")

    def delete(self, book_id):
        self.calls.append("delete")


def _service() -> BookService:
    return BookService(BooksRepoSqlite(sqlite3.connect(":memory:")))


def test_create_then_find_returns_equal_book() -> None:
    svc = _service()
    bid = svc.create(DUNE)
    assert svc.find_by_id(bid) == replace(DUNE, id=bid)


@pytest.mark.parametrize(
    "book",
    [
        None,
        replace(DUNE, title=""),
        replace(DUNE, title="  "),
        replace(DUNE, title=None),
        replace(DUNE, author=""),
        replace(DUNE, author=None),
        replace(DUNE, genre=None),
        replace(DUNE, genre="SCIENCE_FICTION"),
    ],
)
def test_create_rejects_invalid_book_before_store(book) -> None:
    repo = _RecordingBooksRepo()
    with pytest.raises(InvalidInputError):
        BookService(repo).create(book)
    assert repo.calls == []


def test_optional_fields_may_be_absent() -> None:
    svc = _service()
    bid = svc.create(Book(None, "Untitled Draft", "Anon", Genre.SATIRE))
    stored = svc.find_by_id(bid)
    assert stored.publication_year is None
    assert stored.isbn is None
    assert stored.is_available is True


def test_find_all_on_empty_store_raises_not_found() -> None:
    svc = _service()
    with pytest.raises(NotFoundError):
        svc.find_all()
    svc.create(DUNE)
    assert len(svc.find_all()) == 1


def test_search_by_title_or_author() -> None:
    svc = _service()
    dune = svc.create(DUNE)
    hobbit = svc.create(HOBBIT)

    assert [b.id for b in svc.search("HERBERT")] == [dune]
    assert [b.id for b in svc.search("hobbit")] == [hobbit]
    with pytest.raises(InvalidInputError):
        svc.search("\t ")
    with pytest.raises(NotFoundError):
        svc.search("Asimov")


def test_update_round_trips_all_fields() -> None:
    svc = _service()
    bid = svc.create(DUNE)
    new = Book(None, "Dune Messiah", "Frank Herbert", Genre.SAGA, 1969, None, False)
    svc.update(bid, new)
    assert svc.find_by_id(bid) == replace(new, id=bid)


def test_update_missing_book_never_writes() -> None:
    repo = _RecordingBooksRepo()
    with pytest.raises(NotFoundError):
        BookService(repo).update(7, DUNE)
    assert repo.calls == ["find_by_id"]


def test_delete_checks_existence_first() -> None:
    repo = _RecordingBooksRepo()
    with pytest.raises(NotFoundError):
        BookService(repo).delete(7)
    assert repo.calls == ["find_by_id"]

    svc = _service()
    bid = svc.create(HOBBIT)
    svc.delete(bid)
    with pytest.raises(NotFoundError):
        svc.find_by_id(bid)


@pytest.mark.parametrize("bad_id", [0, -3, None, False])
def test_invalid_ids_are_rejected(bad_id) -> None:
    repo = _RecordingBooksRepo()
    svc = BookService(repo)
    with pytest.raises(InvalidInputError):
        svc.find_by_id(bad_id)
    with pytest.raises(InvalidInputError):
        svc.update(bad_id, DUNE)
    with pytest.raises(InvalidInputError):
        svc.delete(bad_id)
    assert repo.calls == []
