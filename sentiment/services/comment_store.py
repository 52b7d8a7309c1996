"""Comment store."""
from __future__ import annotations

import copy
import logging
from typing import Dict, List, Optional, Sequence

import config
from sentiment.errors import InvalidCategory
from sentiment.models import Comment
from sentiment.services.record_store import RecordStore, is_blank

logger = logging.getLogger("sentiment.store")


class CommentStore(RecordStore[Comment]):
    """Bounded collection of comments.

    The store trusts its caller: ``author_id`` is not checked against the
    user store and ``category`` is not validated on create. Authorization
    (owner vs. admin) also happens outside, see ``sentiment.session``.
    """

    kind = "comment"

    def __init__(
        self,
        capacity: Optional[int] = None,
        categories: Optional[Sequence[str]] = None,
        strict_category_on_edit: Optional[bool] = None,
    ):
        super().__init__(config.MAX_RECORDS if capacity is None else capacity)
        self.categories = tuple(config.CATEGORIES if categories is None else categories)
        if strict_category_on_edit is None:
            strict_category_on_edit = config.STRICT_CATEGORY_ON_EDIT
        self.strict_category_on_edit = strict_category_on_edit

    def create_comment(self, author_id: int, text: str, category: str) -> int:
        """Add a comment and return its id."""
        with self._lock:
            comment_id = self._allocate_id()
            self._append(Comment(id=comment_id, author_id=author_id, text=text, category=category))
            logger.debug("Created comment %d by user %s [%s]", comment_id, author_id, category)
            return comment_id

    def list_by_owner(self, user_id: int) -> List[Comment]:
        """Comments written by ``user_id``, in storage order."""
        with self._lock:
            return [copy.copy(c) for c in self._records if c.author_id == user_id]

    def search_by_text(self, needle: str) -> List[Comment]:
        return self._search(needle, lambda c: c.text)

    def edit_comment(self, comment_id: int, text: Optional[str] = None, category: Optional[str] = None) -> None:
        """Overwrite the non-blank fields. Category is only validated in strict mode."""
        with self._lock:
            comment = self._get(comment_id)
            if not is_blank(category) and self.strict_category_on_edit and category not in self.categories:
                raise InvalidCategory(category, self.categories)
            if not is_blank(text):
                comment.text = text
            if not is_blank(category):
                comment.category = category
            logger.debug("Edited comment %d", comment_id)

    def delete_comment(self, comment_id: int) -> None:
        self._delete(comment_id)

    def count_by_category(self, category: str) -> int:
        with self._lock:
            return sum(1 for c in self._records if c.category == category)

    def count_categories(self) -> Dict[str, int]:
        """Count per known category, in configured order."""
        with self._lock:
            return {category: self.count_by_category(category) for category in self.categories}
