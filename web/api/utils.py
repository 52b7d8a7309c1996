"""Shared API utilities."""
from __future__ import annotations

from fastapi import HTTPException, Request, status

from sentiment.errors import (
    CapacityExceeded,
    DuplicateUsername,
    EmptyResult,
    InvalidCategory,
    InvalidCredentials,
    NotFound,
    PermissionDenied,
    SentimentError,
)
from sentiment.services import Storage

_STATUS = [
    (NotFound, status.HTTP_404_NOT_FOUND),
    (EmptyResult, status.HTTP_404_NOT_FOUND),
    (DuplicateUsername, status.HTTP_409_CONFLICT),
    (CapacityExceeded, status.HTTP_409_CONFLICT),
    (PermissionDenied, status.HTTP_403_FORBIDDEN),
    (InvalidCredentials, status.HTTP_401_UNAUTHORIZED),
    (InvalidCategory, status.HTTP_400_BAD_REQUEST),
]


def get_storage(request: Request) -> Storage:
    """Stores live on the app, one pair per process."""
    return request.app.state.storage


def http_error(exc: SentimentError) -> HTTPException:
    """Translate a domain error into an HTTPException. Unlisted errors become 400."""
    for cls, code in _STATUS:
        if isinstance(exc, cls):
            return HTTPException(status_code=code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
