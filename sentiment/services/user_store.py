"""User store: registration, lookup, search and admin management of accounts."""
from __future__ import annotations

import copy
import logging
from typing import List, Optional

import config
from sentiment.errors import DuplicateUsername, NotFound
from sentiment.models import User
from sentiment.services.record_store import RecordStore, is_blank

logger = logging.getLogger("sentiment.store")


class UserStore(RecordStore[User]):
    """Bounded collection of users. Usernames are unique and case-sensitive."""

    kind = "user"

    def __init__(self, capacity: Optional[int] = None, strict_username_on_edit: Optional[bool] = None):
        super().__init__(config.MAX_RECORDS if capacity is None else capacity)
        if strict_username_on_edit is None:
            strict_username_on_edit = config.STRICT_USERNAME_ON_EDIT
        self.strict_username_on_edit = strict_username_on_edit

    def _username_taken(self, username: str, ignore_id: Optional[int] = None) -> bool:
        return any(u.username == username and u.id != ignore_id for u in self._records)

    def create_user(self, username: str, password: str) -> int:
        """Add a user and return its id."""
        with self._lock:
            self._check_capacity()
            if self._username_taken(username):
                logger.info("Duplicate username refused: %s", username)
                raise DuplicateUsername(username)
            user_id = self._allocate_id()
            self._append(User(id=user_id, username=username, password=password))
            logger.debug("Created user %d (%s)", user_id, username)
            return user_id

    def find_by_username(self, username: str) -> User:
        """First live user with exactly this username."""
        with self._lock:
            for user in self._records:
                if user.username == username:
                    return copy.copy(user)
        raise NotFound(f"User with username '{username}' not found")

    def search_by_username(self, needle: str) -> List[User]:
        return self._search(needle, lambda u: u.username)

    def edit_user(self, user_id: int, username: Optional[str] = None, password: Optional[str] = None) -> None:
        """Overwrite the non-blank fields. Uniqueness is only re-checked in strict mode."""
        with self._lock:
            user = self._get(user_id)
            if not is_blank(username):
                if self.strict_username_on_edit and self._username_taken(username, ignore_id=user_id):
                    raise DuplicateUsername(username)
                user.username = username
            if not is_blank(password):
                user.password = password
            logger.debug("Edited user %d", user_id)

    def delete_user(self, user_id: int) -> None:
        self._delete(user_id)
