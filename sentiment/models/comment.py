"""Comment model."""
from __future__ import annotations

from dataclasses import dataclass

from sentiment.models.base import Record


@dataclass
class Comment(Record):
    """Short text tagged with a sentiment category (see ``config.CATEGORIES``)."""

    author_id: int  # User id of the owner; admin comments use config.ADMIN_USER_ID
    text: str
    category: str
