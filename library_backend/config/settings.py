"""Application settings for the library backend.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a frozen Pydantic settings object.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_DB_PATH = Path("data") / "library.sqlite3"
DEFAULT_LOG_FILE = Path("logs") / "app.log"
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    db_path: Path = DEFAULT_DB_PATH
    log_file: Path = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = ConfigDict(frozen=True)


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    db_path = os.getenv("LIBRARY_DB_PATH") or str(DEFAULT_DB_PATH)
    log_file = os.getenv("LIBRARY_LOG_FILE") or str(DEFAULT_LOG_FILE)
    log_level = (os.getenv("LIBRARY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()

    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"LIBRARY_LOG_LEVEL must be a logging level name, got {log_level!r}")

    return Settings(db_path=Path(db_path), log_file=Path(log_file), log_level=log_level)


# Public settings instance
settings = _build_settings()
