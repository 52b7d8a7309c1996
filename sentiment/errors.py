"""Error types shared by the stores, the session layer and the front ends."""
from __future__ import annotations


class SentimentError(Exception):
    """Base exception. The message is safe to show to the user."""


class StoreError(SentimentError):
    """Raised by a record store when an operation is refused."""


class CapacityExceeded(StoreError):
    """Store already holds its maximum number of live records."""

    def __init__(self, kind: str, capacity: int):
        super().__init__(f"Maximum number of {kind}s ({capacity}) reached")
        self.capacity = capacity


class DuplicateUsername(StoreError):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already registered")
        self.username = username


class NotFound(StoreError):
    """Id or username lookup miss."""


class EmptyResult(StoreError):
    """A search matched nothing. The store itself may still hold records."""


class InvalidCategory(StoreError):
    def __init__(self, category: str, allowed: tuple[str, ...]):
        super().__init__(f"Invalid category '{category}', expected one of: {', '.join(allowed)}")
        self.category = category


class PermissionDenied(SentimentError):
    """Actor tried to change a record it does not own."""


class InvalidCredentials(SentimentError):
    pass


class FormError(SentimentError):
    """User input rejected before reaching a store."""
