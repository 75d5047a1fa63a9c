"""Health endpoint and unhandled-error handling."""
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from app.core.database import engine
from app.main import app
from app.models import ErrorLog


def test_health_returns_ok(client: TestClient):
    r = client.get("/health")
    assert r.status_code == 200
    j = r.json()
    assert j.get("status") == "ok"
    assert j.get("openai_configured") is True
    assert j.get("database") == "ok"


def test_responses_carry_request_id(client: TestClient):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")


def test_http_errors_use_error_envelope(client: TestClient):
    r = client.get("/api/auth/me")
    j = r.json()
    assert j["error"] == "Not logged in."
    assert j["status_code"] == 401
    assert j["request_id"] == r.headers["X-Request-ID"]


def test_unhandled_exception_returns_500_and_is_logged(register_user, monkeypatch):
    headers, user = register_user()

    def _boom(db, user_id):
        raise RuntimeError("database exploded")

    monkeypatch.setattr("app.services.chat.list_sessions", _boom)
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/chat/sessions", headers=headers)
    assert r.status_code == 500
    assert r.json() == {"error": "database exploded", "status_code": 500}

    with Session(engine) as db:
        row = db.exec(select(ErrorLog).where(ErrorLog.error_message == "database exploded")).first()
        assert row is not None
        assert row.endpoint == "/api/chat/sessions"
        assert row.method == "GET"
        assert row.user_id == user["id"]
        assert "RuntimeError" in (row.stack_trace or "")
