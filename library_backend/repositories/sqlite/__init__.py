from .books_sqlite import BooksRepoSqlite
from .loans_sqlite import LoansRepoSqlite
from .users_sqlite import UsersRepoSqlite

__all__ = [
    "BooksRepoSqlite",
    "LoansRepoSqlite",
    "UsersRepoSqlite",
]
