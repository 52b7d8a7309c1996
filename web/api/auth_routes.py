"""Auth API routes: register, login, current actor, user management."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict

from sentiment import session
from sentiment.errors import NotFound, SentimentError
from sentiment.services import SortDirection, Storage
from sentiment.services.search import sort_records
from sentiment.session import Actor
from web.api.utils import get_storage, http_error
from web.auth import create_access_token, require_actor, require_admin_actor

logger = logging.getLogger("sentiment.web")

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    username: str
    role: str


class RegisterRequest(BaseModel):
    username: str
    password: str
    confirm_password: str


class ActorResponse(BaseModel):
    user_id: int
    username: str
    role: str


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class CreateUserRequest(BaseModel):
    username: str
    password: str


class UpdateUserRequest(BaseModel):
    username: Optional[str] = None  # blank or missing keeps the current value
    password: Optional[str] = None


def _login_response(actor: Actor) -> LoginResponse:
    return LoginResponse(
        access_token=create_access_token(actor),
        user_id=actor.user_id,
        username=actor.username,
        role=actor.role,
    )


@router.post("/register", response_model=UserResponse)
async def register(body: RegisterRequest, storage: Storage = Depends(get_storage)):
    """Create an account for yourself (no auth required)."""
    try:
        user_id = session.register(storage.users, body.username, body.password, body.confirm_password)
        return UserResponse.model_validate(storage.users.find_by_id(user_id))
    except SentimentError as e:
        raise http_error(e) from e


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, storage: Storage = Depends(get_storage)):
    """Authenticate and return JWT. The fixed admin credential is checked first."""
    if session.is_admin_credential(body.username, body.password):
        return _login_response(session.admin_actor())
    try:
        actor = session.login(storage.users, body.username, body.password)
    except SentimentError as e:
        logger.info("Web login failed for %s: %s", body.username, e)
        raise HTTPException(status_code=401, detail="Invalid username or password") from e
    return _login_response(actor)


@router.get("/me", response_model=ActorResponse)
async def get_me(actor: Actor = Depends(require_actor)):
    """Get current authenticated user or admin."""
    return ActorResponse(user_id=actor.user_id, username=actor.username, role=actor.role)


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    q: Optional[str] = None,
    order: Optional[SortDirection] = None,
    admin: Actor = Depends(require_admin_actor),
    storage: Storage = Depends(get_storage),
):
    """List, search (``q``) or sort (``order``) users (admin only)."""
    users = storage.users
    if q is not None:
        try:
            result = users.search_by_username(q)
        except SentimentError as e:
            raise http_error(e) from e
        if order is not None:
            result = sort_records(result, order, key=lambda u: u.id)
    elif order is not None:
        result = users.sort_by_id(order)
    else:
        result = users.list_all()
    return [UserResponse.model_validate(u) for u in result]


@router.post("/users", response_model=UserResponse)
async def create_user(
    body: CreateUserRequest,
    admin: Actor = Depends(require_admin_actor),
    storage: Storage = Depends(get_storage),
):
    """Create a new user (admin only). Same rules as registration, minus the confirmation."""
    try:
        user_id = session.create_account(storage.users, body.username, body.password)
        return UserResponse.model_validate(storage.users.find_by_id(user_id))
    except SentimentError as e:
        raise http_error(e) from e


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, admin: Actor = Depends(require_admin_actor), storage: Storage = Depends(get_storage)):
    try:
        return UserResponse.model_validate(storage.users.find_by_id(user_id))
    except NotFound as e:
        raise http_error(e) from e


@router.patch("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UpdateUserRequest,
    admin: Actor = Depends(require_admin_actor),
    storage: Storage = Depends(get_storage),
):
    """Update username or password (admin only). Blank fields are left unchanged."""
    try:
        storage.users.edit_user(user_id, body.username, body.password)
        return UserResponse.model_validate(storage.users.find_by_id(user_id))
    except SentimentError as e:
        raise http_error(e) from e


@router.delete("/users/{user_id}")
async def delete_user(user_id: int, admin: Actor = Depends(require_admin_actor), storage: Storage = Depends(get_storage)):
    """Delete a user (admin only). Their comments are kept."""
    try:
        storage.users.delete_user(user_id)
    except NotFound as e:
        raise http_error(e) from e
    logger.info("Admin deleted user %d", user_id)
    return {"ok": True}
