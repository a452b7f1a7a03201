# tests/test_api/test_routes_admin.py - Admin dashboard endpoints

from app.core.config import settings
from app.db.seed import seed_admin
from app.models.order import OrderStatus


def test_admin_listings(client, order_payload, complaint_form, upload_dir):
    client.post("/api/checkout", json=order_payload(), headers={"Authorization": "a"})
    client.post("/api/complaints", data=complaint_form, headers={"Authorization": "b"})

    assert len(client.get("/api/admin/products").json()) == 12
    assert len(client.get("/api/admin/orders").json()) == 1
    assert len(client.get("/api/admin/complaints").json()) == 1


def test_order_stats(client, storage, order_payload):
    client.post("/api/checkout", json=order_payload(1000), headers={"Authorization": "a"})
    client.post("/api/checkout", json=order_payload(2000), headers={"Authorization": "b"})

    assert client.get("/api/admin/stats").json() == {
        "total_orders": 2, "total_revenue": 3000, "pending_orders": 2,
    }

    [first, second] = storage.get_all_orders()
    storage._orders[second.id] = second.model_copy(update={"status": OrderStatus.shipped})
    assert client.get("/api/admin/stats").json()["pending_orders"] == 1


def test_update_complaint_status(client, complaint_form, upload_dir):
    complaint_id = client.post(
        "/api/complaints", data=complaint_form, headers={"Authorization": "b"}
    ).json()["id"]

    answered = client.patch(
        f"/api/admin/complaints/{complaint_id}",
        json={"status": "in-progress", "response": "We are sending a replacement"},
    )
    assert answered.status_code == 200
    assert answered.json()["status"] == "in-progress"

    resolved = client.patch(f"/api/admin/complaints/{complaint_id}", json={"status": "resolved"})
    assert resolved.json()["status"] == "resolved"
    assert resolved.json()["response"] == "We are sending a replacement"
    assert resolved.json()["subject"] == complaint_form["subject"]


def test_update_complaint_errors(client):
    assert client.patch("/api/admin/complaints/99", json={"status": "closed"}).status_code == 404
    assert client.patch("/api/admin/complaints/1", json={"status": "archived"}).status_code == 400
    assert client.patch("/api/admin/complaints/1", json={}).status_code == 400


def test_admin_auth_can_be_required(client, storage, monkeypatch):
    monkeypatch.setattr(settings, "REQUIRE_ADMIN_AUTH", True)
    seed_admin(storage)

    assert client.get("/api/admin/stats").status_code == 401

    client.post("/api/auth/register", json={"username": "shopper", "password": "secret1"})
    assert client.get("/api/admin/stats").status_code == 403

    login = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert login.status_code == 200
    assert client.get("/api/admin/stats").status_code == 200
