from __future__ import annotations

import argparse
import sqlite3
import sys
from pathlib import Path


def ensure_schema(conn: sqlite3.Connection) -> None:
    # Programmatic schema init via the accessors so it always matches code
    from library_backend.repositories.sqlite import (
        BooksRepoSqlite,
        LoansRepoSqlite,
        UsersRepoSqlite,
    )

    UsersRepoSqlite(conn)
    BooksRepoSqlite(conn)
    LoansRepoSqlite(conn)


def main(argv: list[str] | None = None) -> int:
    # Ensure project root (containing 'library_backend') is importable
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

    from library_backend.config.settings import settings
    from library_backend.logging_config import get_logger

    parser = argparse.ArgumentParser(description="Initialize the library SQLite database schema")
    parser.add_argument(
        "--db",
        default=str(settings.db_path),
        help="Path to SQLite DB file (will be created if missing)",
    )
    args = parser.parse_args(argv)

    logger = get_logger()
    db_path = Path(args.db).resolve()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    try:
        ensure_schema(conn)
    finally:
        conn.close()

    logger.info("Schema initialized", extra={"db_path": str(db_path)})
    print(f"Initialized schema at: {db_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
