"""Record models."""
from sentiment.models.base import Record
from sentiment.models.comment import Comment
from sentiment.models.user import User

__all__ = ["Record", "User", "Comment"]
