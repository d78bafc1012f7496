# mypy: ignore-errors

from __future__ import annotations

import sqlite3
from dataclasses import replace
from datetime import date, datetime

import pytest

from library_backend.application.services import LoanService
from library_backend.domain.entities import Book, Loan, User
from library_backend.domain.exceptions import InvalidInputError, NotFoundError
from library_backend.domain.value_objects.enums import Genre
from library_backend.repositories.sqlite import (
    BooksRepoSqlite,
    LoansRepoSqlite,
    UsersRepoSqlite,
)


class _Env:
    def __init__(self) -> None:
        self.conn = sqlite3.connect(":memory:")
        self.users = UsersRepoSqlite(self.conn)
        self.books = BooksRepoSqlite(self.conn)
        self.loans = LoansRepoSqlite(self.conn)
        self.service = LoanService(self.loans, self.books, self.users)
        self.user_id = self.users.create(User(None, "Ana", "ana@example.com", "+5511999990000"))
        self.book_id = self.books.create(Book(None, "Dune", "Frank Herbert", Genre.SCIENCE_FICTION))

    def loan(self, **overrides) -> Loan:
        base = Loan(None, self.user_id, self.book_id, date(2024, 5, 1), date(2024, 5, 15))
        return replace(base, **overrides)


class _SpyUsersRepo(UsersRepoSqlite):
    def __init__(self, conn: sqlite3.Connection) -> None:
        super().__init__(conn)
        self.lookups: list[int] = []

    def find_by_id(self, user_id):
        self.lookups.append(user_id)
        return super().find_by_id(user_id)


@pytest.fixture()
def env() -> _Env:
    return _Env()


def test_create_then_find_returns_equal_loan(env: _Env) -> None:
    loan = env.loan()
    lid = env.service.create(loan)
    assert env.service.find_by_id(lid) == replace(loan, id=lid)


def test_create_with_missing_user_writes_nothing(env: _Env) -> None:
    with pytest.raises(NotFoundError, match="User with ID 999"):
        env.service.create(env.loan(user_id=999))
    assert env.loans.find_all() == []


def test_create_with_missing_book_writes_nothing(env: _Env) -> None:
    with pytest.raises(NotFoundError, match="Book with ID 999"):
        env.service.create(env.loan(book_id=999))
    assert env.loans.find_all() == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"user_id": 0},
        {"user_id": None},
        {"user_id": -1},
        {"user_id": True},
        {"book_id": 0},
        {"book_id": None},
        {"book_id": "1"},
        {"loan_date": None},
        {"due_date": None},
        {"loan_date": datetime(2024, 5, 1, 12, 0)},
        {"return_date": "2024-05-10"},
    ],
)
def test_create_rejects_invalid_shape(env: _Env, overrides: dict) -> None:
    with pytest.raises(InvalidInputError):
        env.service.create(env.loan(**overrides))
    assert env.loans.find_all() == []


def test_create_rejects_none(env: _Env) -> None:
    with pytest.raises(InvalidInputError):
        env.service.create(None)


def test_shape_is_checked_before_references() -> None:
    conn = sqlite3.connect(":memory:")
    users = _SpyUsersRepo(conn)
    service = LoanService(LoansRepoSqlite(conn), BooksRepoSqlite(conn), users)
    with pytest.raises(InvalidInputError):
        service.create(Loan(None, 5, 0, date(2024, 5, 1), date(2024, 5, 2)))
    assert users.lookups == []

    with pytest.raises(NotFoundError):
        service.create(Loan(None, 5, 6, date(2024, 5, 1), date(2024, 5, 2)))
    assert users.lookups == [5]


def test_return_is_recorded_through_update(env: _Env) -> None:
    lid = env.service.create(env.loan())
    returned = env.loan(return_date=date(2024, 5, 9), is_returned=True)
    env.service.update(lid, returned)
    assert env.service.find_by_id(lid) == replace(returned, id=lid)


def test_update_with_unknown_reference_leaves_row_untouched(env: _Env) -> None:
    loan = env.loan()
    lid = env.service.create(loan)
    with pytest.raises(NotFoundError):
        env.service.update(lid, env.loan(book_id=12345))
    assert env.service.find_by_id(lid) == replace(loan, id=lid)


def test_update_missing_loan_raises_not_found(env: _Env) -> None:
    with pytest.raises(NotFoundError, match="Loan with ID 77"):
        env.service.update(77, env.loan())
    with pytest.raises(InvalidInputError):
        env.service.update(0, env.loan())


def test_delete_then_find_raises_not_found(env: _Env) -> None:
    lid = env.service.create(env.loan())
    env.service.delete(lid)
    with pytest.raises(NotFoundError):
        env.service.find_by_id(lid)
    with pytest.raises(NotFoundError):
        env.service.delete(lid)


def test_find_all_empty_raises_not_found(env: _Env) -> None:
    with pytest.raises(NotFoundError):
        env.service.find_all()
    env.service.create(env.loan())
    env.service.create(env.loan(due_date=date(2024, 6, 1)))
    assert len(env.service.find_all()) == 2


@pytest.mark.parametrize("bad_id", [0, -2, None, "3"])
def test_find_by_id_rejects_invalid_ids(env: _Env, bad_id) -> None:
    with pytest.raises(InvalidInputError):
        env.service.find_by_id(bad_id)


def test_deleting_user_does_not_cascade(env: _Env) -> None:
    lid = env.service.create(env.loan())
    env.users.delete(env.user_id)
    assert env.service.find_by_id(lid).user_id == env.user_id


def test_dates_are_stored_without_ordering_rules(env: _Env) -> None:
    loan = env.loan(
        loan_date=date(2024, 5, 10),
        due_date=date(2024, 5, 1),
        return_date=date(2024, 5, 2),
        is_returned=True,
    )
    lid = env.service.create(loan)
    assert env.service.find_by_id(lid) == replace(loan, id=lid)


def test_update_reports_missing_loan_before_references(env: _Env) -> None:
    with pytest.raises(NotFoundError, match="Loan with ID 77"):
        env.service.update(77, env.loan(user_id=999, book_id=999))
