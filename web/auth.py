"""Authentication for web API: JWT tokens, current actor, role and ownership checks."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

import config
from sentiment.errors import NotFound
from sentiment.services import Storage
from sentiment.session import Actor, admin_actor
from web.api.utils import get_storage

http_bearer = HTTPBearer(auto_error=False)


def create_access_token(actor: Actor) -> str:
    expire = datetime.now(timezone.utc) + timedelta(days=config.JWT_EXPIRE_DAYS)
    payload = {"sub": actor.username, "uid": actor.user_id, "role": actor.role, "exp": expire}
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_token(token: str) -> Optional[dict]:
    try:
        return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.InvalidTokenError:
        return None


def actor_from_payload(payload: dict, storage: Storage) -> Optional[Actor]:
    """Rebuild the actor. Users deleted or renamed since the token was issued get None."""
    if payload.get("role") == "admin":
        return admin_actor() if payload.get("sub") == config.ADMIN_USERNAME else None
    uid = payload.get("uid")
    if not isinstance(uid, int):
        return None
    try:
        user = storage.users.find_by_id(uid)
    except NotFound:
        return None
    if user.username != payload.get("sub"):
        return None
    return Actor(user_id=user.id, username=user.username)


async def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
    x_auth_token: Optional[str] = Header(None, alias="X-Auth-Token"),
    storage: Storage = Depends(get_storage),
) -> Optional[Actor]:
    """Return current actor from JWT, or None if not authenticated. Accepts Authorization: Bearer or X-Auth-Token."""
    token = None
    if credentials and credentials.credentials:
        token = credentials.credentials
    elif x_auth_token:
        token = x_auth_token
    if not token:
        return None
    payload = decode_token(token)
    if not payload:
        return None
    return actor_from_payload(payload, storage)


async def require_actor(
    actor: Optional[Actor] = Depends(get_current_actor),
) -> Actor:
    """Require authenticated user or admin. Raises 401 if not logged in."""
    if not actor:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return actor


def require_admin(actor: Actor) -> Actor:
    """Require admin. Raises 403 otherwise."""
    if not actor.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return actor


async def require_admin_actor(
    actor: Actor = Depends(require_actor),
) -> Actor:
    """Dependency: require logged-in admin."""
    return require_admin(actor)
