# tests/test_core/test_monitoring.py

from fastapi.testclient import TestClient

from app.core.monitoring import StoreMonitoring, monitoring
from app.main import app


def test_fresh_monitor_is_healthy():
    health = StoreMonitoring().get_health_status()
    assert health["status"] == "healthy"
    assert health["total_requests"] == 0


def test_client_errors_do_not_hurt_health():
    monitor = StoreMonitoring()
    for _ in range(10):
        monitor.record_request(404, 5.0)

    health = monitor.get_health_status()
    assert health["status"] == "healthy"
    assert health["client_errors"] == 10


def test_server_errors_degrade_health():
    monitor = StoreMonitoring()
    for _ in range(95):
        monitor.record_request(200, 10.0)
    for _ in range(5):
        monitor.record_request(500, 30.0)

    health = monitor.get_health_status()
    assert health["status"] == "degraded"
    assert health["server_errors"] == 5
    assert health["average_response_time_ms"] == 11.0


def test_mostly_failing_is_unhealthy():
    monitor = StoreMonitoring()
    monitor.record_request(200, 1.0)
    monitor.record_request(500, 1.0)
    monitor.record_error("boom", "/api/checkout")

    health = monitor.get_health_status()
    assert health["status"] == "unhealthy"
    assert health["last_error"]["path"] == "/api/checkout"


def test_health_endpoint(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] in {"healthy", "degraded", "unhealthy"}


def test_unhandled_error_is_counted(client, storage, monkeypatch):
    def broken():
        raise RuntimeError("storage offline")

    monkeypatch.setattr(storage, "get_products", broken)
    monitoring.reset()

    with TestClient(app, raise_server_exceptions=False) as failing_client:
        response = failing_client.get("/api/products")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}

    health = client.get("/api/health").json()
    assert health["total_requests"] == 1
    assert health["server_errors"] == 1
    assert health["status"] == "unhealthy"
    assert health["last_error"]["path"] == "/api/products"
