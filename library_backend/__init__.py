"""Library management backend: users, books and loans over SQLite."""
