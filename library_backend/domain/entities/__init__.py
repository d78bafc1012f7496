from .book import Book
from .loan import Loan
from .user import User

__all__ = [
    "Book",
    "Loan",
    "User",
]
