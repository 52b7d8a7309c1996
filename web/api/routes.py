"""API routes for comments and category statistics."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator

from sentiment import session
from sentiment.errors import InvalidCategory, SentimentError
from sentiment.services import SortDirection, Storage
from sentiment.services.search import sort_records
from sentiment.session import Actor
from web.api.utils import get_storage, http_error
from web.auth import require_actor, require_admin_actor

logger = logging.getLogger("sentiment.web")

router = APIRouter(prefix="/api", tags=["comments"])


# --- Pydantic schemas ---


class CommentCreate(BaseModel):
    text: str
    category: str

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Comment must not be empty")
        return v

    @field_validator("category")
    @classmethod
    def known_category(cls, v: str) -> str:
        try:
            return session.validate_category(v)
        except InvalidCategory as e:
            raise ValueError(str(e)) from e


class CommentUpdate(BaseModel):
    """Partial update. Missing or blank fields keep their value; category is not validated here."""

    text: Optional[str] = None
    category: Optional[str] = None


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    text: str
    category: str


def _responses(comments) -> list[CommentResponse]:
    return [CommentResponse.model_validate(c) for c in comments]


@router.get("/health")
async def health():
    return {"status": "ok"}


# --- Comments ---


@router.get("/comments", response_model=list[CommentResponse])
async def list_comments(
    q: Optional[str] = None,
    order: Optional[SortDirection] = None,
    actor: Actor = Depends(require_actor),
    storage: Storage = Depends(get_storage),
):
    """List all comments. ``q`` searches text (case-insensitive), ``order`` sorts by id."""
    comments = storage.comments
    if q is not None:
        try:
            result = comments.search_by_text(q)
        except SentimentError as e:
            raise http_error(e) from e
        if order is not None:
            result = sort_records(result, order, key=lambda c: c.id)
    elif order is not None:
        result = comments.sort_by_id(order)
    else:
        result = comments.list_all()
    return _responses(result)


@router.get("/comments/mine", response_model=list[CommentResponse])
async def list_my_comments(actor: Actor = Depends(require_actor), storage: Storage = Depends(get_storage)):
    """Comments the caller may edit or delete (all of them for the admin)."""
    return _responses(session.editable_comments(actor, storage.comments))


@router.get("/comments/stats")
async def comment_stats(admin: Actor = Depends(require_admin_actor), storage: Storage = Depends(get_storage)):
    """Comment count per category (admin only)."""
    counts = storage.comments.count_categories()
    return {"counts": counts, "total": len(storage.comments)}


@router.get("/comments/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: int, actor: Actor = Depends(require_actor), storage: Storage = Depends(get_storage)):
    try:
        return CommentResponse.model_validate(storage.comments.find_by_id(comment_id))
    except SentimentError as e:
        raise http_error(e) from e


@router.post("/comments", response_model=CommentResponse)
async def create_comment(body: CommentCreate, actor: Actor = Depends(require_actor), storage: Storage = Depends(get_storage)):
    """Post a comment as the current user."""
    try:
        comment_id = storage.comments.create_comment(actor.user_id, body.text, body.category)
        return CommentResponse.model_validate(storage.comments.find_by_id(comment_id))
    except SentimentError as e:
        raise http_error(e) from e


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    body: CommentUpdate,
    actor: Actor = Depends(require_actor),
    storage: Storage = Depends(get_storage),
):
    """Edit a comment (owner or admin)."""
    comments = storage.comments
    try:
        session.ensure_can_modify(actor, comments.find_by_id(comment_id))
        comments.edit_comment(comment_id, body.text, body.category)
        return CommentResponse.model_validate(comments.find_by_id(comment_id))
    except SentimentError as e:
        raise http_error(e) from e


@router.delete("/comments/{comment_id}")
async def delete_comment(comment_id: int, actor: Actor = Depends(require_actor), storage: Storage = Depends(get_storage)):
    """Delete a comment (owner or admin)."""
    comments = storage.comments
    try:
        session.ensure_can_modify(actor, comments.find_by_id(comment_id))
        comments.delete_comment(comment_id)
    except SentimentError as e:
        raise http_error(e) from e
    logger.info("%s deleted comment %d", actor.username, comment_id)
    return {"ok": True}
