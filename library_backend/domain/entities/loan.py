from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class Loan:
    """A book lent to a user.

    ``user_id`` and ``book_id`` are plain references; the store does not
    enforce them, :class:`~library_backend.application.services.loan_service.LoanService`
    does.
    """

    id: int | None
    user_id: int
    book_id: int
    loan_date: date
    due_date: date
    return_date: date | None = None
    is_returned: bool = False
