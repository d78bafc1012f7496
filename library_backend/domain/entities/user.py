from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A library member."""

    id: int | None
    name: str
    email: str
    phone_number: str
