"""Pytest fixtures: test client, test DB (in-memory SQLite), registered users."""
import os
import uuid

import pytest
from fastapi.testclient import TestClient

# Must be set before the app is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("OPENAI_API_KEY", "sk-test-dummy")
os.environ.setdefault("ADMIN_EMAILS", "admin@example.com")
# High limits so the whole suite can register and log in from one client IP
os.environ.setdefault("RATE_LIMIT_REGISTER_PER_MINUTE", "1000")
os.environ.setdefault("RATE_LIMIT_LOGIN_PER_MINUTE", "1000")

from app.main import app

PASSWORD = "secret123"


@pytest.fixture(scope="function")
def client():
    """TestClient; the lifespan creates the tables in the in-memory DB."""
    with TestClient(app) as c:
        yield c


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}-{uuid.uuid4().hex[:10]}@example.com"


def auth_headers_for(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client: TestClient):
    """Registers a fresh user; returns (headers, user json)."""

    def _register(email: str | None = None, password: str = PASSWORD, username: str | None = None):
        body = {"email": email or unique_email(), "password": password}
        if username is not None:
            body["username"] = username
        r = client.post("/api/auth/register", json=body)
        assert r.status_code == 201, f"Register failed: {r.status_code} {r.text}"
        j = r.json()
        return auth_headers_for(j["token"]), j["user"]

    return _register


@pytest.fixture(scope="session")
def _admin_token():
    """One admin for the whole session (email listed in ADMIN_EMAILS)."""
    with TestClient(app) as admin_client:
        r = admin_client.post(
            "/api/auth/register",
            json={"email": "admin@example.com", "password": "admin-pass-123"},
        )
        assert r.status_code == 201, f"Admin register failed: {r.status_code} {r.text}"
        return r.json()["token"]


@pytest.fixture
def admin_headers(_admin_token):
    return auth_headers_for(_admin_token)
