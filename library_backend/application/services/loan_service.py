from __future__ import annotations

import logging
from datetime import date, datetime

from library_backend.domain.entities import Loan
from library_backend.domain.exceptions import InvalidInputError, NotFoundError
from library_backend.repositories.books import BooksRepo
from library_backend.repositories.loans import LoansRepo
from library_backend.repositories.users import UsersRepo

from .validation import is_positive_id, validate_id

logger = logging.getLogger(__name__)


class LoanService:
    """Validate loan operations, including the user/book references.

    References are resolved through the users and books accessors directly,
    after the shape checks and before any write. An unresolved reference
    raises :class:`NotFoundError` and leaves the loan table untouched.

    Example:
        >>> service = LoanService(loans_repo, books_repo, users_repo)
        >>> service.create(Loan(None, 1, 1, date(2024, 5, 1), date(2024, 5, 15)))
        1
    """

    def __init__(self, loans: LoansRepo, books: BooksRepo, users: UsersRepo) -> None:
        self._loans = loans
        self._books = books
        self._users = users

    def create(self, loan: Loan) -> int:
        self._validate_loan(loan)
        return self._loans.create(loan)

    def find_by_id(self, loan_id: int) -> Loan:
        validate_id(loan_id, "Invalid loan ID.")
        loan = self._loans.find_by_id(loan_id)
        if loan is None:
            raise NotFoundError(f"Loan with ID {loan_id} not found.")
        return loan

    def find_all(self) -> list[Loan]:
        loans = self._loans.find_all()
        if not loans:
            raise NotFoundError("No loans found.")
        return loans

    def update(self, loan_id: int, loan: Loan) -> None:
        validate_id(loan_id, "Invalid loan ID.")
        _validate_shape(loan)
        self.find_by_id(loan_id)
        self._check_references(loan)
        self._loans.update(loan_id, loan)

    def delete(self, loan_id: int) -> None:
        validate_id(loan_id, "Invalid loan ID.")
        self.find_by_id(loan_id)
        self._loans.delete(loan_id)

    def _validate_loan(self, loan: Loan | None) -> None:
        _validate_shape(loan)
        self._check_references(loan)

    def _check_references(self, loan: Loan) -> None:
        if self._users.find_by_id(loan.user_id) is None:
            logger.info("Loan rejected: unknown user", extra={"user_id": loan.user_id})
            raise NotFoundError(f"User with ID {loan.user_id} not found.")
        if self._books.find_by_id(loan.book_id) is None:
            logger.info("Loan rejected: unknown book", extra={"book_id": loan.book_id})
            raise NotFoundError(f"Book with ID {loan.book_id} not found.")


def _is_calendar_date(value: object) -> bool:
    # datetime is a date subclass but carries a time component
    return isinstance(value, date) and not isinstance(value, datetime)


def _validate_shape(loan: Loan | None) -> None:
    if loan is None:
        raise InvalidInputError("Loan must not be None.")
    if not is_positive_id(loan.user_id):
        raise InvalidInputError("User ID is required.")
    if not is_positive_id(loan.book_id):
        raise InvalidInputError("Book ID is required.")
    if not _is_calendar_date(loan.loan_date):
        raise InvalidInputError("Loan date is required.")
    if not _is_calendar_date(loan.due_date):
        raise InvalidInputError("Due date is required.")
    if loan.return_date is not None and not _is_calendar_date(loan.return_date):
        raise InvalidInputError("Return date must be a date.")
