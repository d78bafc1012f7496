from .book_service import BookService
from .loan_service import LoanService
from .user_service import UserService

__all__ = [
    "BookService",
    "LoanService",
    "UserService",
]
