"""Container holding one user store and one comment store for a session or app."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import config
from sentiment.services.comment_store import CommentStore
from sentiment.services.user_store import UserStore


@dataclass
class Storage:
    users: UserStore = field(default_factory=UserStore)
    comments: CommentStore = field(default_factory=CommentStore)

    @classmethod
    def create(cls, capacity: Optional[int] = None) -> "Storage":
        """Fresh, empty stores. ``capacity`` defaults to ``config.MAX_RECORDS``."""
        capacity = config.MAX_RECORDS if capacity is None else capacity
        return cls(users=UserStore(capacity), comments=CommentStore(capacity))
