"""
Pytest fixtures for the payment order relay.

The Razorpay gateway and the Supabase table are replaced with the in-memory
fakes from tests.fakes; nothing here talks to the network.
"""

import pytest
from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from app.api.deps import get_order_service
from app.core.supabase import db
from app.main import app
from app.services.order_service import OrderService
from app.services.order_store import OrderStore
from tests.fakes import FakePaymentService, FakeSupabaseClient, FakeTable


@pytest.fixture
def fake_supabase(monkeypatch):
    client = FakeSupabaseClient()

    async def get_client():
        return client

    monkeypatch.setattr(db, "get_client", get_client)
    monkeypatch.setattr(db, "get_service_client", get_client)
    return client


@pytest.fixture
def order_store(fake_supabase) -> OrderStore:
    return OrderStore(table="orders")


@pytest.fixture
def payment_service() -> FakePaymentService:
    return FakePaymentService()


@pytest.fixture
def order_service(payment_service, order_store) -> OrderService:
    return OrderService(payment_service=payment_service, store=order_store)


@pytest.fixture
def client(order_service):
    app.dependency_overrides[get_order_service] = lambda: order_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_row(order_id: str, created_at: datetime) -> dict:
    return {
        "razorpay_order_id": order_id,
        "amount": 1050,
        "currency": "INR",
        "status": "created",
        "created_at": created_at.isoformat(),
        "updated_at": created_at.isoformat(),
    }


@pytest.fixture
def base_time() -> datetime:
    return datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def seeded_rows(fake_supabase, base_time):
    """Three orders created at t1 < t2 < t3, inserted out of order."""
    table = fake_supabase.tables.setdefault("orders", FakeTable())
    t1, t2, t3 = (base_time + timedelta(minutes=i) for i in range(3))
    table.rows.extend([
        make_row("order_t2", t2),
        make_row("order_t1", t1),
        make_row("order_t3", t3),
    ])
    return table
