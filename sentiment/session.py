"""Session and authorization: who is acting, and what they may change."""
from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import List

import config
from sentiment.errors import FormError, InvalidCategory, InvalidCredentials, PermissionDenied
from sentiment.models import Comment
from sentiment.services import CommentStore, UserStore
from sentiment.services.record_store import is_blank

logger = logging.getLogger("sentiment.session")


@dataclass(frozen=True)
class Actor:
    """Authenticated party. The admin is not a stored user and uses ``config.ADMIN_USER_ID``."""

    user_id: int
    username: str
    is_admin: bool = False

    @property
    def role(self) -> str:
        return "admin" if self.is_admin else "user"


def admin_actor() -> Actor:
    return Actor(user_id=config.ADMIN_USER_ID, username=config.ADMIN_USERNAME, is_admin=True)


def is_admin_credential(username: str, password: str) -> bool:
    return bool(config.ADMIN_PASSWORD) and (
        hmac.compare_digest(username.encode("utf-8"), config.ADMIN_USERNAME.encode("utf-8"))
        and hmac.compare_digest(password.encode("utf-8"), config.ADMIN_PASSWORD.encode("utf-8"))
    )


def admin_login(username: str, password: str) -> Actor:
    """Check the fixed admin credential."""
    if not is_admin_credential(username, password):
        logger.info("Rejected admin login for %s", username)
        raise InvalidCredentials("Invalid admin username or password")
    return admin_actor()


def login(users: UserStore, username: str, password: str) -> Actor:
    """Authenticate a stored user. Raises NotFound for an unknown username."""
    if is_blank(username) or is_blank(password):
        raise FormError("Username and password must not be empty")
    user = users.find_by_username(username)
    if user.password != password:
        logger.info("Wrong password for %s", username)
        raise InvalidCredentials("Wrong password")
    logger.info("User %s logged in", username)
    return Actor(user_id=user.id, username=user.username)


def create_account(users: UserStore, username: str, password: str) -> int:
    """Create a user after the checks every front end shares: non-blank fields, admin name reserved."""
    if is_blank(username) or is_blank(password):
        raise FormError("Username and password must not be empty")
    if username == config.ADMIN_USERNAME:
        raise FormError(f"Username '{username}' is reserved")
    user_id = users.create_user(username, password)
    logger.info("Created account %s (id %d)", username, user_id)
    return user_id


def register(users: UserStore, username: str, password: str, confirm_password: str) -> int:
    """Validate the registration form and create the user."""
    if is_blank(username) or is_blank(password) or is_blank(confirm_password):
        raise FormError("Username, password and password confirmation must not be empty")
    if password != confirm_password:
        raise FormError("Password and password confirmation do not match")
    return create_account(users, username, password)


def validate_category(value: str, categories=None) -> str:
    """Normalize and check a category from a form."""
    allowed = tuple(config.CATEGORIES if categories is None else categories)
    category = (value or "").strip().lower()
    if category not in allowed:
        raise InvalidCategory(value, allowed)
    return category


def can_modify(actor: Actor, comment: Comment) -> bool:
    return actor.is_admin or comment.author_id == actor.user_id


def ensure_can_modify(actor: Actor, comment: Comment) -> None:
    """Raise PermissionDenied unless ``actor`` is the admin or owns ``comment``."""
    if not can_modify(actor, comment):
        logger.info("User %s denied access to comment %d", actor.username, comment.id)
        raise PermissionDenied("You can only change your own comments")


def editable_comments(actor: Actor, comments: CommentStore) -> List[Comment]:
    """Comments ``actor`` may edit or delete."""
    if actor.is_admin:
        return comments.list_all()
    return comments.list_by_owner(actor.user_id)
