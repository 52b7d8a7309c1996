"""Pytest configuration and fixtures for store, console and API tests."""
import os

# Set test env BEFORE any imports that use config
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "testpass123"
os.environ["MAX_RECORDS"] = "255"
os.environ["STRICT_USERNAME_ON_EDIT"] = "false"
os.environ["STRICT_CATEGORY_ON_EDIT"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

from sentiment.services import CommentStore, Storage, UserStore
from web.api.main import app


@pytest.fixture(autouse=True)
def _reset_storage():
    """Fresh in-memory stores for every test."""
    app.state.storage = Storage.create()
    yield
    app.state.storage = Storage.create()


@pytest.fixture
def users():
    return UserStore(capacity=255)


@pytest.fixture
def comments():
    return CommentStore(capacity=255)


@pytest.fixture
def storage():
    return Storage.create()


@pytest.fixture
async def client():
    """Async HTTP client for testing the API."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


async def _login(client, username, password):
    r = await client.post("/api/auth/login", json={"username": username, "password": password})
    assert r.status_code == 200, f"Login failed: {r.text}"
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client):
    """Login as admin and return Authorization headers for protected endpoints."""
    return await _login(client, "admin", "testpass123")


@pytest.fixture
async def user_headers(client):
    """Register and login as 'alice'."""
    r = await client.post(
        "/api/auth/register",
        json={"username": "alice", "password": "pw", "confirm_password": "pw"},
    )
    assert r.status_code == 200, r.text
    return await _login(client, "alice", "pw")


@pytest.fixture
async def other_headers(client):
    """Register and login as 'bob'."""
    r = await client.post(
        "/api/auth/register",
        json={"username": "bob", "password": "pw2", "confirm_password": "pw2"},
    )
    assert r.status_code == 200, r.text
    return await _login(client, "bob", "pw2")
