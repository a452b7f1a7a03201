# tests/conftest.py - Shared fixtures: fresh store per test, app client wired to it

import os

# Settings are read at import time; SECRET_KEY has no default
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_PASSWORD", "admin123")

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.db.deps import get_otp_store, get_sms_sender, get_storage
from app.db.seed import seed_products
from app.db.storage import MemStorage
from app.main import app
from app.schemas.order import OrderCreate
from app.services.otp_service import OtpStore


class FakeSmsSender:
    """Stands in for Twilio; keeps every message it was asked to send"""

    def __init__(self, configured: bool = True):
        self.configured = configured
        self.sent = []

    def send(self, to: str, body: str):
        self.sent.append((to, body))


@pytest.fixture
def empty_storage():
    return MemStorage()


@pytest.fixture
def storage():
    store = MemStorage()
    seed_products(store)
    return store


@pytest.fixture
def otp_store():
    return OtpStore(ttl_seconds=300)


@pytest.fixture
def sms_sender():
    return FakeSmsSender()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture
def client(storage, otp_store, sms_sender):
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_otp_store] = lambda: otp_store
    app.dependency_overrides[get_sms_sender] = lambda: sms_sender
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def order_payload():
    def build(total: float = 1000, **overrides) -> dict:
        payload = {
            "customer_name": "Asha Verma",
            "email": "asha@example.com",
            "phone": "9876543210",
            "address": "12 MG Road",
            "city": "Bengaluru",
            "state": "Karnataka",
            "pincode": "560001",
            "total": total,
            "payment_method": "cod",
            "items": [{"product_id": 1, "name": "iPhone 13 Pro", "price": total, "quantity": 1}],
        }
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def make_order(order_payload):
    def build(total: float = 1000, **overrides) -> OrderCreate:
        return OrderCreate(**order_payload(total, **overrides))
    return build


@pytest.fixture
def complaint_form():
    return {
        "customer_name": "Rahul Mehta",
        "customer_email": "rahul@example.com",
        "customer_phone": "9123456780",
        "subject": "Damaged headphones",
        "description": "The left ear cup was cracked when the package arrived.",
        "order_number": "ORD-42",
    }
