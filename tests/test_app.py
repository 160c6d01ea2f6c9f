"""Startup, health and optional auth behaviour of the FastAPI app."""

from fastapi.testclient import TestClient
from jose import jwt

from app.core.config import settings
from app.core.supabase import db
from app.main import app
from app.services.order_service import OrderService


def test_store_failure_at_startup_is_not_fatal(monkeypatch):
    async def failing_connect():
        raise RuntimeError("supabase unreachable")

    monkeypatch.setattr(db, "connect", failing_connect)

    with TestClient(app) as client:
        assert isinstance(app.state.order_service, OrderService)
        assert client.get(f"{settings.API_V1_STR}/health").json() == {"status": "ok"}


def test_orders_fail_individually_when_store_unconfigured(monkeypatch):
    async def failing_connect():
        raise RuntimeError("supabase unreachable")

    monkeypatch.setattr(db, "connect", failing_connect)
    monkeypatch.setattr(settings, "SUPABASE_URL", "")
    monkeypatch.setattr(settings, "SUPABASE_KEY", "")
    monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", None)
    db.reset()

    with TestClient(app) as client:
        response = client.get("/orders")

    assert response.status_code == 500
    assert "SUPABASE_URL" in response.json()["error"]


def test_root():
    response = TestClient(app).get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_orders_require_token_when_auth_enabled(client, fake_supabase, monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_AUTH", True)

    response = client.get("/orders")

    assert response.status_code == 401


def test_orders_accept_valid_token_when_auth_enabled(client, fake_supabase, monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_AUTH", True)
    monkeypatch.setattr(settings, "SUPABASE_JWT_SECRET", "test-secret")
    token = jwt.encode({"sub": "user-1", "email": "a@example.com"}, "test-secret", algorithm="HS256")

    response = client.get("/orders", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == []


def test_orders_reject_bad_token_when_auth_enabled(client, fake_supabase, monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_AUTH", True)
    monkeypatch.setattr(settings, "SUPABASE_JWT_SECRET", "test-secret")
    token = jwt.encode({"sub": "user-1"}, "other-secret", algorithm="HS256")

    response = client.get("/orders", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
