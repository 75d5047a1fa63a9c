"""Rate limit: per-IP quota returns 429 with the error envelope."""
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.core.rate_limit import limiter
from app.main import _rate_limit_handler
from conftest import PASSWORD, unique_email

# Built once: slowapi keeps limits per endpoint name on the shared limiter
limited_app = FastAPI()
limited_app.state.limiter = limiter
limited_app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)


@limited_app.get("/limited")
@limiter.limit("2/minute")
def limited(request: Request):
    return {"ok": True}


def test_limited_route_200_then_429():
    with TestClient(limited_app) as c:
        headers = {"X-Forwarded-For": "203.0.113.7"}
        for i in range(2):
            r = c.get("/limited", headers=headers)
            assert r.status_code == 200, f"Request {i+1} should be 200"
            assert r.json() == {"ok": True}
        r = c.get("/limited", headers=headers)
        assert r.status_code == 429
        j = r.json()
        assert j["error"] == "Too many requests. Please wait a minute."
        assert j["status_code"] == 429


def test_quota_is_per_client_ip():
    with TestClient(limited_app) as c:
        for _ in range(2):
            assert c.get("/limited", headers={"X-Forwarded-For": "198.51.100.1"}).status_code == 200
        assert c.get("/limited", headers={"X-Forwarded-For": "198.51.100.1"}).status_code == 429
        assert c.get("/limited", headers={"X-Forwarded-For": "198.51.100.2, 10.0.0.1"}).status_code == 200


def test_register_is_rate_limited(client: TestClient, monkeypatch):
    monkeypatch.setattr(settings, "rate_limit_register_per_minute", 2)
    headers = {"X-Forwarded-For": "192.0.2.10"}
    for _ in range(2):
        r = client.post("/api/auth/register", json={"email": unique_email(), "password": PASSWORD}, headers=headers)
        assert r.status_code == 201
    r = client.post("/api/auth/register", json={"email": unique_email(), "password": PASSWORD}, headers=headers)
    assert r.status_code == 429
    assert r.json()["error"] == "Too many requests. Please wait a minute."


def test_login_is_rate_limited(client: TestClient, monkeypatch):
    email = unique_email("throttled")
    client.post("/api/auth/register", json={"email": email, "password": PASSWORD})
    monkeypatch.setattr(settings, "rate_limit_login_per_minute", 3)
    headers = {"X-Forwarded-For": "192.0.2.20"}
    for _ in range(3):
        r = client.post("/api/auth/login", json={"email": email, "password": "wrongpass"}, headers=headers)
        assert r.status_code == 401
    r = client.post("/api/auth/login", json={"email": email, "password": PASSWORD}, headers=headers)
    assert r.status_code == 429
    assert "token" not in r.json()
