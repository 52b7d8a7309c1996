"""In-memory record stores."""
from sentiment.services.comment_store import CommentStore
from sentiment.services.search import SortDirection
from sentiment.services.storage import Storage
from sentiment.services.user_store import UserStore

__all__ = ["CommentStore", "SortDirection", "Storage", "UserStore"]
