"""User model."""
from __future__ import annotations

from dataclasses import dataclass

from sentiment.models.base import Record


@dataclass
class User(Record):
    """Registered account. Password is kept as plain text."""

    username: str
    password: str
