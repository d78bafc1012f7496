from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from library_backend.domain.entities import Loan


class LoansRepo(ABC):
    """Accessor interface for :class:`Loan` entities."""

    @abstractmethod
    def create(self, loan: Loan) -> int:
        """Persist a new loan and return the store-assigned identifier."""

    @abstractmethod
    def find_by_id(self, loan_id: int) -> Optional[Loan]:
        """Return a loan by its identifier if present."""

    @abstractmethod
    def find_all(self) -> list[Loan]:
        """Return every stored loan."""

    @abstractmethod
    def update(self, loan_id: int, loan: Loan) -> None:
        """Overwrite every mutable field of the loan identified by ``loan_id``."""

    @abstractmethod
    def delete(self, loan_id: int) -> None:
        """Remove the loan identified by ``loan_id``."""
